from dateutil.relativedelta import relativedelta
from django import forms
from django.conf import settings
from django.utils import timezone

from .constants import CDL_CLASS_CHOICES, ENDORSEMENT_CHOICES

# DOT 体检证最长有效期
MEDICAL_CARD_MAX_VALIDITY = relativedelta(years=2)


def get_form_features():
    features = {
        "MULTI_ATTACHMENT": True,
        "MULTI_SELECT_LICENSE_CLASSES": True,
    }
    features.update(getattr(settings, "DQF_FORM_FEATURES", {}) or {})
    return features


# 页面分卡片显示的字段
PERSONAL_FIELDS = ('first_name', 'last_name', 'email', 'phone')
LICENSE_FIELDS = ('license_number', 'license_state', 'license_expiry')
LICENSE_CLASS_FIELDS = ('cdl_class', 'endorsements')

DRAFT_FIELDS = PERSONAL_FIELDS + LICENSE_FIELDS + LICENSE_CLASS_FIELDS + (
    'medical_card_number', 'medical_card_expiry', 'notes',
)


# ✅ 司机入职表单（个人 / 驾照 / 体检证 / 备注）
class DriverRecordForm(forms.Form):
    first_name = forms.CharField(label="First Name", max_length=64)
    last_name = forms.CharField(label="Last Name", max_length=64)
    email = forms.EmailField(label="Email Address")
    phone = forms.CharField(label="Phone Number", max_length=32,
                            widget=forms.TextInput(attrs={'type': 'tel'}))

    license_number = forms.CharField(label="License Number", max_length=32)
    license_state = forms.CharField(label="License State", max_length=32)
    license_expiry = forms.DateField(label="Expiry Date",
                                     widget=forms.DateInput(attrs={'type': 'date'}))

    medical_card_number = forms.CharField(
        label="Medical Card Number", max_length=64, required=False,
        widget=forms.TextInput(attrs={'placeholder': 'Enter medical certificate number'}),
    )
    medical_card_expiry = forms.DateField(
        label="Medical Card Expiration Date", required=False,
        widget=forms.DateInput(attrs={'type': 'date'}),
    )
    notes = forms.CharField(
        label="Notes", required=False,
        widget=forms.Textarea(attrs={'rows': 4, 'placeholder': 'Any additional information about the driver...'}),
    )

    def __init__(self, *args, features=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.features = features or get_form_features()

        # CDL 种类 / 附加签注：多选 or 单选+自由文本
        if self.features.get("MULTI_SELECT_LICENSE_CLASSES"):
            self.fields['cdl_class'] = forms.MultipleChoiceField(
                label="CDL Class", choices=CDL_CLASS_CHOICES, required=False,
                widget=forms.CheckboxSelectMultiple(),
            )
            self.fields['endorsements'] = forms.MultipleChoiceField(
                label="Endorsements", choices=ENDORSEMENT_CHOICES, required=False,
                widget=forms.CheckboxSelectMultiple(),
            )
        else:
            self.fields['cdl_class'] = forms.ChoiceField(
                label="CDL Class", required=False,
                choices=[("", "Select CDL Class")] + CDL_CLASS_CHOICES,
                widget=forms.Select(attrs={'class': 'form-select'}),
            )
            self.fields['endorsements'] = forms.CharField(
                label="Endorsements", max_length=64, required=False,
                widget=forms.TextInput(attrs={'placeholder': 'e.g., H, N, P, S, T, X'}),
            )
        # 字段顺序：驾照信息放在体检证之前
        self.order_fields(DRAFT_FIELDS)

    @property
    def personal_fields(self):
        return [self[name] for name in PERSONAL_FIELDS]

    @property
    def license_fields(self):
        return [self[name] for name in LICENSE_FIELDS]

    @property
    def license_class_fields(self):
        return [self[name] for name in LICENSE_CLASS_FIELDS]

    def clean_medical_card_expiry(self):
        expiry = self.cleaned_data.get('medical_card_expiry')
        if not expiry:
            return expiry
        today = timezone.localdate()
        if expiry < today:
            raise forms.ValidationError("Medical card expiration date cannot be in the past.")
        if expiry > today + MEDICAL_CARD_MAX_VALIDITY:
            raise forms.ValidationError("Medical certificates are valid for at most 24 months.")
        return expiry


def draft_from_post(post, features=None):
    """从 POST 里取出表单字段原值，存进会话用（多选模式下 CDL/签注保留列表）"""
    features = features or get_form_features()
    multi = set()
    if features.get("MULTI_SELECT_LICENSE_CLASSES"):
        multi = {'cdl_class', 'endorsements'}

    draft = {}
    for name in DRAFT_FIELDS:
        if name in multi:
            draft[name] = post.getlist(name)
        elif name in post:
            draft[name] = post.get(name)
    return draft
