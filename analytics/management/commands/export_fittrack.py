"""
Django management command to export a user's FitTrack data as JSON.

Usage:
    python manage.py export_fittrack --user <username>
    python manage.py export_fittrack --user alice --output backups/
"""
import json
import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.utils import timezone

from fittrack.exporting import build_export, export_filename
from fittrack.record_store import RecordStore


class Command(BaseCommand):
    help = 'Export all calorie, weight and workout entries of a user to a JSON file'

    def add_arguments(self, parser):
        parser.add_argument(
            '--user',
            required=True,
            help='Username whose entries are exported'
        )
        parser.add_argument(
            '--output',
            default='.',
            help='Directory or file path to write to (default: current directory)'
        )
        parser.add_argument(
            '--to-stdout',
            action='store_true',
            help='Print the export instead of writing a file'
        )

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.get(username=options['user'])
        except User.DoesNotExist:
            self.stdout.write(self.style.ERROR(f"User not found: {options['user']}"))
            return

        exported_at = timezone.now()
        records = RecordStore().snapshot(user.id)
        document = build_export(records, exported_at)
        payload = json.dumps(document, indent=2)

        if options['to_stdout']:
            self.stdout.write(payload)
            return

        output = options['output']
        path = os.path.join(output, export_filename(exported_at)) if os.path.isdir(output) else output
        with open(path, 'w') as f:
            f.write(payload)

        self.stdout.write(self.style.SUCCESS(f'Exported data for {user.username} to {path}'))
        self.stdout.write(f'  Calories: {len(records.calories)}')
        self.stdout.write(f'  Weights: {len(records.weights)}')
        self.stdout.write(f'  Workouts: {len(records.workouts)}')
