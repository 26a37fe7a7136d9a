from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from analytics.records import CalorieRecord


class CalorieEntry(models.Model):
    """
    A day's calorie intake, with optional macronutrient breakdown.
    """
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='calorie_entries'
    )
    date = models.DateField(
        db_index=True,
        help_text="Calendar day the intake was eaten on"
    )
    total_calories = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text="Total calories consumed"
    )
    protein = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        help_text="Protein in grams"
    )
    carbs = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        help_text="Carbohydrates in grams"
    )
    fat = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        help_text="Fat in grams"
    )
    notes = models.TextField(null=True, blank=True)

    # Audit fields
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-date', '-created_at']
        indexes = [
            models.Index(fields=['user', '-date'], name='calorie_user_date_idx'),
        ]
        verbose_name = 'Calorie Entry'
        verbose_name_plural = 'Calorie Entries'

    def __str__(self):
        return f"{self.total_calories} cal on {self.date.strftime('%Y-%m-%d')}"

    def to_record(self):
        return CalorieRecord(
            id=self.id,
            user_id=self.user_id,
            date=self.date,
            total_calories=self.total_calories,
            created_at=self.created_at,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            notes=self.notes or None,
        )
