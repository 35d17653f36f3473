# common/context_processors.py
from django.urls import reverse

NAV_ITEMS = [
    ("drivers:dashboard", "Dashboard"),
    ("drivers:driver_add", "Add Driver"),
]


def nav_items(request):
    path = getattr(request, "path", "")
    items = []
    for view_name, label in NAV_ITEMS:
        url = reverse(view_name)
        items.append({
            'url': url,
            'label': label,
            'is_active': path == url,
        })
    return {'nav_items': items}
