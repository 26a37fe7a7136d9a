import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='WeightEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(help_text='Calendar day the weight was measured on')),
                ('weight', models.DecimalField(decimal_places=2, help_text='Weight in kilograms (kg)', max_digits=5, validators=[django.core.validators.MinValueValidator(0.01)])),
                ('notes', models.TextField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='weight_entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Weight Entry',
                'verbose_name_plural': 'Weight Entries',
                'ordering': ['-date'],
                'indexes': [models.Index(fields=['user', '-date'], name='weight_user_date_idx')],
                'unique_together': {('user', 'date')},
            },
        ),
    ]
