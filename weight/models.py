from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from analytics.records import WeightRecord


class WeightEntry(models.Model):
    """
    A body-weight measurement. One per user per calendar day.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='weight_entries'
    )
    date = models.DateField(
        help_text="Calendar day the weight was measured on"
    )
    weight = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        validators=[MinValueValidator(0.01)],
        help_text="Weight in kilograms (kg)"
    )
    notes = models.TextField(null=True, blank=True)

    # Audit fields
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date']
        unique_together = ['user', 'date']
        indexes = [
            models.Index(fields=['user', '-date'], name='weight_user_date_idx'),
        ]
        verbose_name = 'Weight Entry'
        verbose_name_plural = 'Weight Entries'

    def __str__(self):
        return f"{self.weight} kg on {self.date.strftime('%Y-%m-%d')}"

    def to_record(self):
        return WeightRecord(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            weight=self.weight,
            created_at=self.created_at,
            notes=self.notes or None,
        )
