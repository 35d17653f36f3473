from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase

from common.context_processors import nav_items
from common.middleware import NavigationUsageMiddleware


class NavItemsTests(SimpleTestCase):
    def test_marks_current_page_active(self):
        request = RequestFactory().get("/drivers/add/")
        items = nav_items(request)["nav_items"]
        self.assertEqual([i["label"] for i in items], ["Dashboard", "Add Driver"])
        self.assertEqual([i["is_active"] for i in items], [False, True])

    def test_dashboard_active_on_root(self):
        items = nav_items(RequestFactory().get("/"))["nav_items"]
        self.assertTrue(items[0]["is_active"])
        self.assertEqual(items[0]["url"], "/")


class NavigationUsageMiddlewareTests(SimpleTestCase):
    def test_logs_each_request_at_debug(self):
        middleware = NavigationUsageMiddleware(lambda request: HttpResponse(status=204))
        with self.assertLogs("common.middleware", level="DEBUG") as logs:
            response = middleware(RequestFactory().post("/drivers/add/"))
        self.assertEqual(response.status_code, 204)
        self.assertIn("path=/drivers/add/ method=POST status=204", logs.output[0])
