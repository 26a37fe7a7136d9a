from django import forms

from .models import WorkoutEntry


class WorkoutEntryForm(forms.ModelForm):
    class Meta:
        model = WorkoutEntry
        fields = ['date', 'type', 'duration', 'intensity', 'notes']
        labels = {
            'duration': 'Duration (minutes)',
        }
