from datetime import timedelta

from dateutil.relativedelta import relativedelta
from django import forms
from django.http import QueryDict
from django.test import SimpleTestCase
from django.utils import timezone

from drivers.forms import DriverRecordForm, draft_from_post

MULTI = {"MULTI_ATTACHMENT": True, "MULTI_SELECT_LICENSE_CLASSES": True}
SCALAR = {"MULTI_ATTACHMENT": False, "MULTI_SELECT_LICENSE_CLASSES": False}


def valid_data(**overrides):
    data = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane.doe@example.com",
        "phone": "555-0100",
        "license_number": "D1234567",
        "license_state": "TX",
        "license_expiry": (timezone.localdate() + timedelta(days=365)).isoformat(),
    }
    data.update(overrides)
    return data


class DriverRecordFormTests(SimpleTestCase):
    def test_multi_select_license_classes(self):
        form = DriverRecordForm(valid_data(cdl_class=["A", "B"], endorsements=["H", "X"]), features=MULTI)
        self.assertIsInstance(form.fields["cdl_class"], forms.MultipleChoiceField)
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["cdl_class"], ["A", "B"])
        self.assertEqual(form.cleaned_data["endorsements"], ["H", "X"])

    def test_unknown_endorsement_is_rejected(self):
        form = DriverRecordForm(valid_data(endorsements=["Z"]), features=MULTI)
        self.assertFalse(form.is_valid())
        self.assertIn("endorsements", form.errors)

    def test_scalar_license_classes(self):
        form = DriverRecordForm(valid_data(cdl_class="C", endorsements="H, N"), features=SCALAR)
        self.assertIsInstance(form.fields["cdl_class"], forms.ChoiceField)
        self.assertIsInstance(form.fields["endorsements"], forms.CharField)
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data["endorsements"], "H, N")

    def test_fields_grouped_by_card(self):
        form = DriverRecordForm(features=MULTI)
        self.assertEqual([f.name for f in form.personal_fields], ["first_name", "last_name", "email", "phone"])
        self.assertEqual([f.name for f in form.license_fields], ["license_number", "license_state", "license_expiry"])
        self.assertEqual([f.name for f in form.license_class_fields], ["cdl_class", "endorsements"])

    def test_required_fields(self):
        form = DriverRecordForm({}, features=MULTI)
        self.assertFalse(form.is_valid())
        for name in ("first_name", "last_name", "email", "phone",
                     "license_number", "license_state", "license_expiry"):
            self.assertIn(name, form.errors)
        self.assertNotIn("medical_card_number", form.errors)

    def test_medical_card_expiry_cannot_be_past(self):
        past = (timezone.localdate() - timedelta(days=1)).isoformat()
        form = DriverRecordForm(valid_data(medical_card_expiry=past), features=MULTI)
        self.assertFalse(form.is_valid())
        self.assertIn("medical_card_expiry", form.errors)

    def test_medical_card_expiry_capped_at_two_years(self):
        too_far = (timezone.localdate() + relativedelta(years=2, days=1)).isoformat()
        form = DriverRecordForm(valid_data(medical_card_expiry=too_far), features=MULTI)
        self.assertFalse(form.is_valid())

        ok = (timezone.localdate() + relativedelta(years=2)).isoformat()
        self.assertTrue(DriverRecordForm(valid_data(medical_card_expiry=ok), features=MULTI).is_valid())


class DraftFromPostTests(SimpleTestCase):
    def test_multi_mode_keeps_lists(self):
        post = QueryDict("first_name=Jane&cdl_class=A&cdl_class=B&endorsements=H")
        draft = draft_from_post(post, MULTI)
        self.assertEqual(draft["first_name"], "Jane")
        self.assertEqual(draft["cdl_class"], ["A", "B"])
        self.assertEqual(draft["endorsements"], ["H"])
        self.assertNotIn("email", draft)

    def test_scalar_mode_keeps_strings(self):
        post = QueryDict("cdl_class=A&endorsements=H%2C+N")
        draft = draft_from_post(post, SCALAR)
        self.assertEqual(draft["cdl_class"], "A")
        self.assertEqual(draft["endorsements"], "H, N")
