from django import forms

from .models import CalorieEntry


class CalorieEntryForm(forms.ModelForm):
    class Meta:
        model = CalorieEntry
        fields = ['date', 'total_calories', 'protein', 'carbs', 'fat', 'notes']
        labels = {
            'total_calories': 'Total calories',
            'protein': 'Protein (g)',
            'carbs': 'Carbs (g)',
            'fat': 'Fat (g)',
        }
