from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase

from analytics.formatting import round_half_up
from analytics.summaries import (
    NO_DATA,
    CalorieSummary,
    WeightSummary,
    calorie_summary_display,
    format_change,
    summarize_calories,
    summarize_weights,
    summarize_workouts,
    summary_as_json,
    weight_changes,
)
from analytics.tests.factories import calorie, weight, workout


class CalorieSummaryTests(SimpleTestCase):

    def test_average_is_rounded_mean_within_bounds(self):
        samples = [
            [2000],
            [1800, 2200, 2101],
            [1, 2],
            [2500, 2500, 1999, 3001, 1234],
        ]
        for values in samples:
            entries = [calorie(date(2024, 1, i + 1), total) for i, total in enumerate(values)]
            summary = summarize_calories(entries)
            self.assertEqual(summary.average, round_half_up(sum(values) / len(values)))
            self.assertEqual(summary.highest, max(values))
            self.assertEqual(summary.lowest, min(values))
            self.assertTrue(min(values) <= summary.average <= max(values))

    def test_half_rounds_up(self):
        summary = summarize_calories([calorie(date(2024, 1, 1), 1), calorie(date(2024, 1, 2), 2)])
        self.assertEqual(summary, CalorieSummary(average=2, highest=2, lowest=1))

    def test_round_half_up_is_not_bankers_rounding(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(Decimal('2250.5')), 2251)
        self.assertEqual(round_half_up(0.49), 0)

    def test_empty_is_no_data_not_zero(self):
        summary = summarize_calories([])
        self.assertIs(summary, NO_DATA)
        self.assertNotEqual(summary, CalorieSummary(0, 0, 0))
        self.assertFalse(summary)
        self.assertEqual(calorie_summary_display(summary)['average'], '-')
        self.assertIsNone(summary_as_json(summary))


class WeightSummaryTests(SimpleTestCase):

    def test_start_current_change(self):
        entries = [weight(date(2024, 1, 1), 200), weight(date(2024, 1, 8), 190)]
        summary = summarize_weights(entries)
        self.assertEqual(summary, WeightSummary(start=Decimal(200), current=Decimal(190), change=Decimal(-10)))

    def test_input_order_does_not_matter(self):
        entries = [weight(date(2024, 1, 8), 190), weight(date(2024, 1, 1), 200)]
        self.assertEqual(summarize_weights(entries).change, Decimal(-10))

    def test_single_entry_has_zero_change(self):
        summary = summarize_weights([weight(date(2024, 1, 1), 80.5)])
        self.assertEqual(summary.change, 0)
        self.assertEqual(summary.start, summary.current)

    def test_empty_is_no_data(self):
        self.assertIs(summarize_weights([]), NO_DATA)

    def test_changes_between_entries(self):
        entries = [
            weight(date(2024, 1, 1), '80.0'),
            weight(date(2024, 1, 3), '80.6'),
            weight(date(2024, 1, 2), '79.9'),
        ]
        rows = weight_changes(entries)
        self.assertEqual([entry.date for entry, _ in rows], [date(2024, 1, 3), date(2024, 1, 2), date(2024, 1, 1)])
        self.assertEqual([format_change(change) for _, change in rows], ['+0.7', '-0.1', '-'])


class WorkoutSummaryTests(SimpleTestCase):

    def test_most_common_type_and_total(self):
        entries = [
            workout(date(2024, 1, 1), 'cardio', 30),
            workout(date(2024, 1, 2), 'cardio', 40),
            workout(date(2024, 1, 3), 'hiit', 20),
        ]
        summary = summarize_workouts(entries)
        self.assertEqual(summary.most_common_type, 'cardio')
        self.assertEqual(summary.total, 3)
        self.assertEqual(summary.avg_duration, 30)
        self.assertEqual(summary.most_common_label, 'Cardio')

    def test_tie_goes_to_first_seen_type(self):
        entries = [
            workout(date(2024, 1, 1), 'lower'),
            workout(date(2024, 1, 2), 'upper'),
            workout(date(2024, 1, 3), 'upper'),
            workout(date(2024, 1, 4), 'lower'),
        ]
        self.assertEqual(summarize_workouts(entries).most_common_type, 'lower')

    def test_average_duration_rounds_half_up(self):
        entries = [workout(date(2024, 1, 1), duration=30), workout(date(2024, 1, 2), duration=45)]
        self.assertEqual(summarize_workouts(entries).avg_duration, 38)

    def test_empty_is_no_data(self):
        self.assertIs(summarize_workouts([]), NO_DATA)
