"""Round trip through the export document and the import_fittrack command."""
import json
import os
import tempfile
from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal
from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase

from analytics.records import CALORIE, WEIGHT, WORKOUT
from calories.models import CalorieEntry
from fittrack.exporting import build_export, export_filename, import_export
from fittrack.record_store import RecordStore
from weight.models import WeightEntry
from workouts.models import WorkoutEntry

User = get_user_model()

EXPORTED_AT = datetime(2024, 3, 13, 15, 0, tzinfo=dt_timezone.utc)

# Fields that are compared after a round trip; ids and timestamps are reassigned
CALORIE_FIELDS = ('date', 'total_calories', 'protein', 'carbs', 'fat', 'notes')
WEIGHT_FIELDS = ('date', 'weight', 'notes')
WORKOUT_FIELDS = ('date', 'type', 'duration', 'intensity', 'notes')


def _values(records, names):
    return sorted(tuple(getattr(record, name) for name in names) for record in records)


class ExportImportRoundTripTests(TestCase):

    def setUp(self):
        self.store = RecordStore()
        self.source = User.objects.create_user('alice', 'alice@example.com', 'pw')
        self.target = User.objects.create_user('bob', 'bob@example.com', 'pw')

        CalorieEntry.objects.create(
            user=self.source, date=date(2024, 3, 1), total_calories=2150,
            protein=Decimal('140.25'), carbs=Decimal('210.50'), fat=None, notes='Pasta night',
        )
        CalorieEntry.objects.create(user=self.source, date=date(2024, 3, 2), total_calories=1890)
        WeightEntry.objects.create(user=self.source, date=date(2024, 3, 1), weight=Decimal('82.35'))
        WeightEntry.objects.create(user=self.source, date=date(2024, 3, 8), weight=Decimal('81.10'), notes='Morning')
        WorkoutEntry.objects.create(
            user=self.source, date=date(2024, 3, 4), type='hiit', duration=25, intensity='high',
        )

    def export_json(self):
        document = build_export(self.store.snapshot(self.source.id), EXPORTED_AT)
        return json.loads(json.dumps(document))

    def test_document_shape(self):
        document = self.export_json()
        self.assertEqual(document['exportDate'], EXPORTED_AT.isoformat())
        self.assertEqual(document['calories'][0]['date'], '2024-03-02')
        self.assertEqual(document['weights'][0]['weight'], 81.1)
        self.assertEqual(document['workouts'][0]['type_label'], 'HIIT')
        self.assertEqual(export_filename(EXPORTED_AT), 'fittrack-export-2024-03-13.json')

    def test_round_trip_preserves_fields(self):
        results = import_export(self.store, self.target.id, self.export_json())

        self.assertEqual([r.created for r in results], [2, 2, 1])
        self.assertTrue(all(r.success and not r.skipped for r in results))

        before = self.store.snapshot(self.source.id)
        after = self.store.snapshot(self.target.id)
        self.assertEqual(_values(after.calories, CALORIE_FIELDS), _values(before.calories, CALORIE_FIELDS))
        self.assertEqual(_values(after.weights, WEIGHT_FIELDS), _values(before.weights, WEIGHT_FIELDS))
        self.assertEqual(_values(after.workouts, WORKOUT_FIELDS), _values(before.workouts, WORKOUT_FIELDS))

        # Fresh ids, owned by the importing user
        self.assertTrue(set(r.id for r in after.calories).isdisjoint(r.id for r in before.calories))
        self.assertTrue(all(r.user_id == self.target.id for r in after.weights))

    def test_reimport_onto_same_user_dedups_weights(self):
        results = import_export(self.store, self.source.id, self.export_json())
        weights = results[1]
        self.assertEqual(weights.updated, 2)
        self.assertEqual(weights.created, 0)
        self.assertEqual(len(self.store.list(self.source.id, WEIGHT)), 2)
        self.assertEqual(len(self.store.list(self.source.id, CALORIE)), 4)

    def test_invalid_items_are_skipped(self):
        document = {
            'calories': [
                {'date': '2024-03-01', 'total_calories': 2000},
                {'date': '2024-03-02', 'total_calories': -4},
                'not an entry',
            ],
            'workouts': [{'date': '2024-03-01', 'type': 'yoga', 'duration': 30, 'intensity': 'low'}],
        }
        results = import_export(self.store, self.target.id, document)
        calories, weights, workouts = results
        self.assertEqual((calories.created, calories.skipped), (1, 2))
        self.assertEqual(weights.summary, 'No records processed')
        self.assertEqual(workouts.skipped, 1)
        self.assertEqual(len(calories.errors), 2)
        self.assertEqual(len(self.store.list(self.target.id, WORKOUT)), 0)

    def test_malformed_macros_import_as_none(self):
        document = {'calories': [
            {'date': '2024-03-01', 'total_calories': 2000, 'protein': 'n/a', 'carbs': '', 'fat': '12.5'},
        ]}
        results = import_export(self.store, self.target.id, document)
        self.assertEqual(results[0].created, 1)
        record = self.store.list(self.target.id, CALORIE)[0]
        self.assertIsNone(record.protein)
        self.assertIsNone(record.carbs)
        self.assertEqual(record.fat, Decimal('12.5'))

    def test_dry_run_writes_nothing(self):
        results = import_export(self.store, self.target.id, self.export_json(), dry_run=True)
        self.assertEqual(sum(r.created for r in results), 5)
        self.assertEqual(self.store.list(self.target.id, CALORIE), [])

    def test_dry_run_counts_match_a_real_import(self):
        WeightEntry.objects.create(user=self.target, date=date(2024, 3, 1), weight=Decimal('90.00'))

        dry = import_export(self.store, self.target.id, self.export_json(), dry_run=True)
        self.assertEqual(WeightEntry.objects.get(user=self.target).weight, Decimal('90.00'))

        real = import_export(self.store, self.target.id, self.export_json())
        self.assertEqual([(r.created, r.updated) for r in dry], [(r.created, r.updated) for r in real])
        self.assertEqual((dry[1].created, dry[1].updated), (1, 1))

    def test_non_object_document_rejected(self):
        with self.assertRaises(ValueError):
            import_export(self.store, self.target.id, ['calories'])


class ImportCommandTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user('alice', 'alice@example.com', 'pw')
        handle, self.path = tempfile.mkstemp(suffix='.json')
        with os.fdopen(handle, 'w') as f:
            json.dump({
                'calories': [{'date': '2024-03-01', 'total_calories': 2000, 'protein': 120.5}],
                'weights': [{'date': '2024-03-01', 'weight': 80.25}],
                'workouts': [],
                'exportDate': '2024-03-13T15:00:00+00:00',
            }, f)
        self.addCleanup(os.remove, self.path)

    def test_import_command(self):
        out = StringIO()
        call_command('import_fittrack', self.path, user='alice', stdout=out)
        output = out.getvalue()
        self.assertIn('Import completed for alice', output)
        self.assertIn('calories: 1 created', output)
        self.assertEqual(CalorieEntry.objects.get(user=self.user).protein, Decimal('120.50'))
        self.assertEqual(WeightEntry.objects.get(user=self.user).weight, Decimal('80.25'))

    def test_dry_run(self):
        out = StringIO()
        call_command('import_fittrack', self.path, user='alice', dry_run=True, stdout=out)
        self.assertIn('DRY RUN MODE', out.getvalue())
        self.assertEqual(CalorieEntry.objects.count(), 0)

    def test_unknown_user(self):
        out = StringIO()
        call_command('import_fittrack', self.path, user='nobody', stdout=out)
        self.assertIn('User not found: nobody', out.getvalue())
        self.assertEqual(CalorieEntry.objects.count(), 0)

    def test_missing_file(self):
        out = StringIO()
        call_command('import_fittrack', '/nonexistent/export.json', user='alice', stdout=out)
        self.assertIn('File not found', out.getvalue())


class ExportCommandTests(TestCase):

    def test_export_to_stdout(self):
        user = User.objects.create_user('alice', 'alice@example.com', 'pw')
        WorkoutEntry.objects.create(user=user, date=date(2024, 3, 4), type='cardio', duration=40, intensity='low')

        out = StringIO()
        call_command('export_fittrack', user='alice', to_stdout=True, stdout=out)
        document = json.loads(out.getvalue())
        self.assertEqual(document['workouts'][0]['duration'], 40)
        self.assertEqual(document['calories'], [])

    def test_export_to_directory(self):
        User.objects.create_user('alice', 'alice@example.com', 'pw')
        with tempfile.TemporaryDirectory() as directory:
            out = StringIO()
            call_command('export_fittrack', user='alice', output=directory, stdout=out)
            files = os.listdir(directory)
            self.assertEqual(len(files), 1)
            self.assertTrue(files[0].startswith('fittrack-export-'))
            with open(os.path.join(directory, files[0])) as f:
                self.assertEqual(set(json.load(f)), {'calories', 'weights', 'workouts', 'exportDate'})
