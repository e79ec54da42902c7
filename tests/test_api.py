"""Tests for the FastAPI endpoints.

``discover_feed`` and ``find_feeds`` are patched where ``app_server`` imported
them, so no network calls are made.
"""

from unittest import TestCase, mock

from fastapi.testclient import TestClient

from feedlocator.app_server import app
from feedlocator.main.tools.client import ClientTimeoutError
from feedlocator.main.tools.parsers import ParserError
from feedlocator.main.tools.reader import SubscriptionNotFoundError, UnsupportedFeedFormatError


class TestAPI(TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.client = TestClient(app)

    def test_routes(self) -> None:
        paths = {route.path for route in app.routes}
        self.assertIn("/discoverFeed", paths)
        self.assertIn("/findFeeds", paths)

    def test_root(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("message", response.json())

    def test_discover_feed(self) -> None:
        info = {"url": "https://example.com/feed.xml", "modified": True, "format": "Rss20", "title": "Example"}
        with mock.patch("feedlocator.app_server.discover_feed", return_value=info) as discover:
            response = self.client.post("/discoverFeed", params={"site_url": "example.com", "etag": "abc"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), info)
        discover.assert_called_once_with("example.com", etag="abc", last_modified="")

    def test_discover_feed_error_mapping(self) -> None:
        cases = [
            (SubscriptionNotFoundError("none"), 404),
            (UnsupportedFeedFormatError("what"), 422),
            (ParserError("broken"), 422),
            (ClientTimeoutError("slow"), 502),
        ]
        for exc, status in cases:
            with self.subTest(exc=type(exc).__name__):
                with mock.patch("feedlocator.app_server.discover_feed", side_effect=exc):
                    response = self.client.post("/discoverFeed", params={"site_url": "example.com"})
                self.assertEqual(response.status_code, status)
                self.assertEqual(response.json()["detail"], str(exc))

    def test_find_feeds(self) -> None:
        feeds = ["https://example.com/atom.xml", "https://example.com/rss.xml"]
        with mock.patch("feedlocator.app_server.find_feeds", return_value=feeds):
            response = self.client.get("/findFeeds", params={"site_url": "https://example.com"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"site_url": "https://example.com", "feeds": feeds})
