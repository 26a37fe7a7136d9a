from django.contrib import admin
from .models import WorkoutEntry


@admin.register(WorkoutEntry)
class WorkoutEntryAdmin(admin.ModelAdmin):
    list_display = (
        'date',
        'user',
        'type_display',
        'duration_display',
        'intensity',
    )
    list_filter = ('type', 'intensity', 'date')
    search_fields = ('user__username', 'notes')
    readonly_fields = ('created_at', 'updated_at', 'duration_display')
    date_hierarchy = 'date'

    fieldsets = (
        ('Owner', {
            'fields': ('user',)
        }),
        ('Workout Details', {
            'fields': (
                'date',
                'type',
                'duration',
                'intensity',
                'notes',
            )
        }),
        ('Audit Information', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def type_display(self, obj):
        """Display human-readable workout type"""
        return obj.get_type_display()
    type_display.short_description = 'Type'
    type_display.admin_order_field = 'type'

    def duration_display(self, obj):
        """Display workout duration in readable format"""
        hours, minutes = divmod(obj.duration or 0, 60)
        if hours > 0:
            return f"{hours}h {minutes}m"
        return f"{minutes}m"
    duration_display.short_description = 'Duration'
