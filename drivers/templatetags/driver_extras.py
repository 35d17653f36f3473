from datetime import date, datetime

from dateutil.relativedelta import relativedelta
from django import template
from django.utils import timezone

from drivers.constants import BYTES_PER_MB

register = template.Library()


@register.filter
def size_mb(value):
    """字节数 → MB（两位小数），非数字返回空字符串"""
    try:
        return f"{int(value) / BYTES_PER_MB:.2f}"
    except (TypeError, ValueError):
        return ""


@register.filter
def attachment_count(value):
    """
    附件数量文案：
        1 → "1 file attached"
        3 → "3 files attached"
    """
    try:
        n = len(value)
    except TypeError:
        n = int(value or 0)
    return f"{n} file{'' if n == 1 else 's'} attached"


@register.filter
def expires_in(value):
    """
    距到期的相对时间，例：
        today + 1y2m → "in 1 year, 2 months"
        已过期 → "expired"
    接受 date 或 'YYYY-MM-DD' 字符串，无法解析返回空字符串。
    """
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            return ""
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        return ""

    today = timezone.localdate()
    if value < today:
        return "expired"
    if value == today:
        return "today"

    delta = relativedelta(value, today)
    parts = []
    for amount, unit in ((delta.years, "year"), (delta.months, "month"), (delta.days, "day")):
        if amount:
            parts.append(f"{amount} {unit}{'' if amount == 1 else 's'}")
    return "in " + ", ".join(parts)
