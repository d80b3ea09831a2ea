#!/usr/bin/env python3
"""
Unit tests for the Discord webhook notifier.
"""

import unittest
from unittest.mock import patch, MagicMock
import requests
from archive.discord import DiscordNotifier
from archive.models.post import Post

WEBHOOK = "https://discord.example/api/webhooks/1/token"

def response(status_code, body=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = ""
    resp.json.return_value = body or {}
    return resp

class TestDelivery(unittest.TestCase):
    """Test cases for DiscordNotifier.deliver retry handling."""

    def setUp(self):
        self.notifier = DiscordNotifier(WEBHOOK, max_retries=2)
        sleep_patcher = patch("archive.discord.time.sleep")
        self.sleep = sleep_patcher.start()
        self.addCleanup(sleep_patcher.stop)

    @patch("archive.discord.requests.post")
    def test_success(self, mock_post):
        mock_post.return_value = response(204)
        self.assertTrue(self.notifier.deliver({"content": "hi"}))
        mock_post.assert_called_once_with(WEBHOOK, json={"content": "hi"}, timeout=10.0)

    @patch("archive.discord.requests.post")
    def test_rate_limited_then_success(self, mock_post):
        mock_post.side_effect = [response(429, {"retry_after": 0.5, "global": False}), response(204)]
        self.assertTrue(self.notifier.deliver({"content": "hi"}))
        self.assertEqual(mock_post.call_count, 2)
        self.sleep.assert_called_once_with(0.5)

    @patch("archive.discord.requests.post")
    def test_client_error_is_not_retried(self, mock_post):
        mock_post.return_value = response(400)
        self.assertTrue(self.notifier.deliver({"content": "hi"}))
        mock_post.assert_called_once()

    @patch("archive.discord.requests.post")
    def test_server_error_gives_up(self, mock_post):
        mock_post.return_value = response(502)
        self.assertFalse(self.notifier.deliver({"content": "hi"}))
        self.assertEqual(mock_post.call_count, 3)

    @patch("archive.discord.requests.post")
    def test_network_error_retried(self, mock_post):
        mock_post.side_effect = [requests.exceptions.ConnectionError("down"), response(200)]
        self.assertTrue(self.notifier.deliver({"content": "hi"}))
        self.assertEqual(mock_post.call_count, 2)

class TestQueueing(unittest.TestCase):
    """Test cases for building and queueing notifications."""

    def test_disabled_without_webhook(self):
        notifier = DiscordNotifier("")
        self.assertFalse(notifier.enabled)
        self.assertFalse(notifier.is_healthy())
        notifier.send_plaintext("ignored")
        self.assertEqual(notifier.get_queue_size(), 0)

    def test_disabled_by_flag(self):
        notifier = DiscordNotifier(WEBHOOK, enabled=False)
        notifier.send_plaintext("ignored")
        self.assertEqual(notifier.get_queue_size(), 0)

    @patch.object(DiscordNotifier, "_ensure_worker")
    def test_diagnostic_payload(self, _):
        notifier = DiscordNotifier(WEBHOOK)
        notifier.send_diagnostic("error", "Post Repository", "Disk full", {"File": "a.md"})

        payload = notifier.notification_queue.get_nowait()
        embed = payload["embeds"][0]
        self.assertEqual(payload["username"], "Archive")
        self.assertEqual(embed["color"], 0xff0000)
        self.assertEqual(embed["description"], "Disk full")
        self.assertIn({"name": "File", "value": "a.md", "inline": False}, embed["fields"])

    @patch.object(DiscordNotifier, "_ensure_worker")
    def test_post_published_payload(self, _):
        notifier = DiscordNotifier(WEBHOOK)
        post = Post("2024-05-01-hi", "Hi", "Hi...", "Hi", ["a", "b"], "public",
                    "2024-05-01T00:00:00.000Z", 1, filename="2024-05-01-hi.md")
        notifier.post_published(post)

        embed = notifier.notification_queue.get_nowait()["embeds"][0]
        self.assertEqual(embed["title"], "📝 Published: Hi")
        self.assertIn({"name": "Tags", "value": "a, b", "inline": False}, embed["fields"])

    @patch("archive.discord.requests.post")
    def test_worker_drains_queue_on_shutdown(self, mock_post):
        mock_post.return_value = response(204)
        notifier = DiscordNotifier(WEBHOOK)
        notifier.post_deleted("2024-05-01-hi")
        notifier.shutdown()

        mock_post.assert_called_once()
        self.assertEqual(mock_post.call_args.kwargs["json"]["content"], "🗑️ Deleted post `2024-05-01-hi`")
        self.assertEqual(notifier.get_queue_size(), 0)

if __name__ == '__main__':
    unittest.main()
