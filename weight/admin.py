from django.contrib import admin
from .models import WeightEntry


@admin.register(WeightEntry)
class WeightEntryAdmin(admin.ModelAdmin):
    list_display = (
        'date',
        'weight',
        'user',
        'created_at',
    )
    list_filter = ('date', 'user')
    search_fields = ('user__username', 'notes')
    readonly_fields = ('created_at', 'updated_at')
    date_hierarchy = 'date'

    fieldsets = (
        ('Owner', {
            'fields': ('user',)
        }),
        ('Measurement', {
            'fields': (
                'date',
                'weight',
                'notes',
            )
        }),
        ('Audit Information', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
