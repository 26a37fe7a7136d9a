"""
Django management command to import a FitTrack JSON export for a user.

Usage:
    python manage.py import_fittrack <path_to_export.json> --user <username>
    python manage.py import_fittrack fittrack-export-2025-05-01.json --user alice --dry-run
"""
import json
import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from fittrack.exporting import import_export
from fittrack.record_store import RecordStore


class Command(BaseCommand):
    help = 'Import calorie, weight and workout entries from a FitTrack JSON export'

    def add_arguments(self, parser):
        parser.add_argument(
            'json_file',
            type=str,
            help='Path to a fittrack-export-YYYY-MM-DD.json file'
        )
        parser.add_argument(
            '--user',
            required=True,
            help='Username that will own the imported entries'
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Validate the file without importing anything'
        )

    def handle(self, *args, **options):
        json_file = options['json_file']
        dry_run = options['dry_run']

        if dry_run:
            self.stdout.write(self.style.WARNING('DRY RUN MODE - No data will be imported'))

        if not os.path.exists(json_file):
            self.stdout.write(self.style.ERROR(f'File not found: {json_file}'))
            return

        User = get_user_model()
        try:
            user = User.objects.get(username=options['user'])
        except User.DoesNotExist:
            self.stdout.write(self.style.ERROR(f"User not found: {options['user']}"))
            return

        try:
            self.stdout.write(f'Reading file: {json_file}')
            with open(json_file, 'r') as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            self.stdout.write(self.style.ERROR(f'Invalid JSON file: {e}'))
            return

        try:
            results = import_export(RecordStore(), user.id, document, dry_run=dry_run)
        except ValueError as e:
            self.stdout.write(self.style.ERROR(str(e)))
            return

        self.stdout.write(self.style.SUCCESS(
            f'\n{"DRY RUN " if dry_run else ""}Import completed for {user.username}!'
        ))
        for result in results:
            style = self.style.SUCCESS if result.success else self.style.ERROR
            self.stdout.write(style(f'  {result.kind}: {result.summary}'))
            for error in result.errors:
                self.stdout.write(self.style.WARNING(f'    {error}'))
