from django.contrib import admin
from .models import CalorieEntry


@admin.register(CalorieEntry)
class CalorieEntryAdmin(admin.ModelAdmin):
    list_display = ['date', 'user', 'total_calories', 'protein', 'carbs', 'fat', 'created_at']
    list_filter = ['date', 'user']
    search_fields = ['user__username', 'notes']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'date'

    fieldsets = (
        ('Owner', {
            'fields': ('user',)
        }),
        ('Intake', {
            'fields': ('date', 'total_calories', 'protein', 'carbs', 'fat', 'notes')
        }),
        ('Audit Information', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
