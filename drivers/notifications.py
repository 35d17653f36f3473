# drivers/notifications.py
from django.contrib import messages


class RequestNotifier:
    """
    把 toast（标题 + 说明）写进 Django messages。
    模板里按 level 渲染：success / warning / error
    """
    def __init__(self, request):
        self.request = request

    def _add(self, level, title, description):
        text = f"{title}: {description}" if description else title
        messages.add_message(self.request, level, text, extra_tags="toast")

    def success(self, title, description=""):
        self._add(messages.SUCCESS, title, description)

    def warning(self, title, description=""):
        self._add(messages.WARNING, title, description)

    def error(self, title, description=""):
        self._add(messages.ERROR, title, description)
