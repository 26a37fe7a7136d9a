from datetime import date, datetime, timezone as dt_timezone

from django.test import SimpleTestCase

from analytics.formatting import subtract_months
from analytics.tests.factories import calorie, weight
from analytics.windows import filter_by_window, parse_window, window_cutoff


class WindowFilterTests(SimpleTestCase):

    def test_seven_day_window_is_boundary_inclusive(self):
        now = datetime(2024, 1, 10, 9, 30, tzinfo=dt_timezone.utc)
        included = calorie(date(2024, 1, 3))
        excluded = calorie(date(2024, 1, 2))

        result = filter_by_window([included, excluded], '7days', now)

        self.assertEqual(result, [included])

    def test_all_returns_everything(self):
        records = [calorie(date(2001, 1, 1)), calorie(date(2024, 1, 1))]
        self.assertEqual(filter_by_window(records, 'all', date(2024, 1, 10)), records)

    def test_order_is_preserved(self):
        now = date(2024, 6, 30)
        records = [weight(date(2024, 6, 29), 80), weight(date(2024, 6, 1), 81), weight(date(2024, 6, 15), 82)]
        self.assertEqual(filter_by_window(records, '30days', now), records)

    def test_month_windows_use_calendar_months(self):
        self.assertEqual(window_cutoff('3months', date(2024, 1, 31)), date(2023, 10, 31))
        self.assertEqual(window_cutoff('6months', date(2024, 8, 31)), date(2024, 2, 29))

    def test_unknown_window_raises(self):
        with self.assertRaises(ValueError):
            parse_window('90days')
        with self.assertRaises(ValueError):
            filter_by_window([], 'yesterday', date(2024, 1, 1))

    def test_blank_window_uses_default(self):
        self.assertEqual(parse_window(None), 'all')
        self.assertEqual(parse_window('', default='7days'), '7days')


class SubtractMonthsTests(SimpleTestCase):

    def test_clamps_to_end_of_month(self):
        self.assertEqual(subtract_months(date(2023, 5, 31), 3), date(2023, 2, 28))
        self.assertEqual(subtract_months(date(2024, 5, 31), 3), date(2024, 2, 29))

    def test_crosses_year_boundary(self):
        self.assertEqual(subtract_months(date(2024, 2, 15), 3), date(2023, 11, 15))
