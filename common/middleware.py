# common/middleware.py
import logging
from django.utils import timezone

logger = logging.getLogger(__name__)


class NavigationUsageMiddleware:
    """
    极简导航使用记录：对所有请求打印一条 DEBUG 日志（默认不输出，因为 root level 为 INFO）。
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        logger.debug(
            "[nav-usage] path=%s method=%s status=%s ip=%s at=%s",
            request.path_info, request.method, response.status_code,
            request.META.get("REMOTE_ADDR"), timezone.now().isoformat()
        )
        return response
