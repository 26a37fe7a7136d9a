from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from analytics.records import INTENSITIES, WORKOUT_TYPE_LABELS, WorkoutRecord


class WorkoutEntry(models.Model):
    """
    A logged workout session.
    """
    TYPE_CHOICES = list(WORKOUT_TYPE_LABELS.items())

    INTENSITY_CHOICES = [(intensity, intensity.title()) for intensity in INTENSITIES]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='workout_entries'
    )
    date = models.DateField(db_index=True, help_text="Calendar day the workout took place")
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, help_text="Workout category")
    duration = models.PositiveIntegerField(validators=[MinValueValidator(1)], help_text="Duration in minutes")
    intensity = models.CharField(max_length=10, choices=INTENSITY_CHOICES)
    notes = models.TextField(null=True, blank=True)

    # Audit fields
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date", "-created_at"]
        indexes = [
            models.Index(fields=["user", "-date"], name="workout_user_date_idx"),
        ]

    def __str__(self):
        return f"{self.get_type_display()} workout on {self.date.strftime('%Y-%m-%d')}"

    def to_record(self):
        return WorkoutRecord(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            type=self.type,
            duration=self.duration,
            intensity=self.intensity,
            created_at=self.created_at,
            notes=self.notes or None,
        )
