from datetime import timedelta

from dateutil.relativedelta import relativedelta
from django.test import SimpleTestCase
from django.utils import timezone

from drivers.templatetags.driver_extras import attachment_count, expires_in, size_mb


class DriverExtrasTests(SimpleTestCase):
    def test_size_mb(self):
        self.assertEqual(size_mb(2 * 1024 * 1024), "2.00")
        self.assertEqual(size_mb(123456), "0.12")
        self.assertEqual(size_mb(None), "")

    def test_attachment_count_pluralizes(self):
        self.assertEqual(attachment_count(["a"]), "1 file attached")
        self.assertEqual(attachment_count(["a", "b", "c"]), "3 files attached")
        self.assertEqual(attachment_count([]), "0 files attached")
        self.assertEqual(attachment_count(2), "2 files attached")

    def test_expires_in(self):
        today = timezone.localdate()
        self.assertEqual(expires_in(today + relativedelta(years=1, months=2)), "in 1 year, 2 months")
        self.assertEqual(expires_in((today + timedelta(days=3)).isoformat()), "in 3 days")
        self.assertEqual(expires_in(today), "today")
        self.assertEqual(expires_in(today - timedelta(days=1)), "expired")
        self.assertEqual(expires_in("not-a-date"), "")
        self.assertEqual(expires_in(None), "")
