# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import threading
import queue
import logging
import os
import time
import requests
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

logger = logging.getLogger(__name__)

LEVEL_COLORS = {
    'info': 0x0099ff,
    'warning': 0xffaa00,
    'error': 0xff0000,
    'critical': 0x990000
}

LEVEL_EMOJIS = {
    'info': '🔵',
    'warning': '🟡',
    'error': '🔴',
    'critical': '🚨'
}

class DiscordNotifier:
    """
    Non-blocking Discord webhook notifier for archive events and diagnostics.

    Messages are queued and delivered by a single daemon worker thread, so a
    slow or failing webhook never holds up a request. Without a webhook URL
    the notifier is disabled and every send is a no-op.
    """

    def __init__(self, webhook_url: Optional[str] = None, enabled: bool = True,
                 username: str = "Archive", max_retries: int = 3, timeout: float = 10.0):
        self.webhook_url = webhook_url if webhook_url is not None else os.getenv('DISCORD_WEBHOOK_URL')
        self.enabled = enabled and bool(self.webhook_url)
        self.username = username
        self.max_retries = max_retries
        self.timeout = timeout

        self.notification_queue: "queue.Queue[Dict[str, Any]]" = queue.Queue()
        self._worker_thread: Optional[threading.Thread] = None
        self._stop_worker = threading.Event()
        self._worker_lock = threading.Lock()

        if not self.enabled:
            logger.info("No Discord webhook configured, notifications disabled")

    def _ensure_worker(self):
        with self._worker_lock:
            if self._worker_thread is None or not self._worker_thread.is_alive():
                self._stop_worker.clear()
                self._worker_thread = threading.Thread(
                    target=self._worker_loop,
                    daemon=True,
                    name="DiscordNotifier"
                )
                self._worker_thread.start()
                logger.debug("Discord notification worker started")

    def _worker_loop(self):
        while not self._stop_worker.is_set() or not self.notification_queue.empty():
            try:
                payload = self.notification_queue.get(timeout=1.0)
            except queue.Empty:
                continue

            try:
                if not self.deliver(payload):
                    logger.error(f"Dropping Discord notification after {self.max_retries} retries: {payload}")
            except Exception as e:
                logger.error(f"Error in Discord notification worker: {e}", exc_info=True)
            finally:
                self.notification_queue.task_done()

    def deliver(self, payload: Dict[str, Any]) -> bool:
        """
        POST one payload to the webhook, retrying rate limits and server errors.
        Returns True when Discord accepted it or rejected it for good (4xx).
        """
        for attempt in range(self.max_retries + 1):
            try:
                response = requests.post(self.webhook_url, json=payload, timeout=self.timeout)
            except requests.exceptions.RequestException as e:
                logger.warning(f"Network error sending Discord notification (attempt {attempt + 1}): {e}")
                if attempt < self.max_retries:
                    time.sleep(2 ** attempt + 1)
                continue

            if response.status_code == 429:
                try:
                    retry_after = float(response.json().get('retry_after', 1.0))
                except ValueError:
                    retry_after = 1.0
                logger.warning(f"Discord rate limit hit, waiting {retry_after:.2f}s")
                time.sleep(retry_after)
                continue

            if 400 <= response.status_code < 500:
                logger.error(f"Discord rejected notification ({response.status_code}): {response.text}")
                return True

            if not response.ok:
                logger.warning(f"Discord webhook error {response.status_code} (attempt {attempt + 1})")
                if attempt < self.max_retries:
                    time.sleep(2 ** attempt + 1)
                continue

            return True
        return False

    def _enqueue(self, payload: Dict[str, Any]):
        if not self.enabled:
            return
        payload.setdefault('username', self.username)
        self.notification_queue.put(payload)
        self._ensure_worker()

    def send_plaintext(self, message: str, username: Optional[str] = None):
        """Queue a plain text message."""
        payload: Dict[str, Any] = {'content': message}
        if username:
            payload['username'] = username
        self._enqueue(payload)

    def send_embed(self, title: str, description: str = "", color: int = 0x00ff00,
                   fields: Optional[List[Dict[str, Any]]] = None, footer: Optional[str] = None):
        """Queue a single-embed message."""
        embed: Dict[str, Any] = {
            'title': title,
            'description': description,
            'color': color,
            'timestamp': datetime.now(timezone.utc).isoformat()
        }
        if fields:
            embed['fields'] = fields
        if footer:
            embed['footer'] = {'text': footer}
        self._enqueue({'embeds': [embed]})

    def send_diagnostic(self, level: str, service: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Queue a diagnostic embed coloured by level ('info', 'warning', 'error', 'critical')."""
        level = level.lower()
        fields = [
            {'name': 'Service', 'value': service, 'inline': True},
            {'name': 'Level', 'value': level.upper(), 'inline': True}
        ]
        for key, value in (details or {}).items():
            fields.append({'name': key, 'value': str(value), 'inline': False})

        self.send_embed(
            title=f"{LEVEL_EMOJIS.get(level, '🔘')} Archive Diagnostic - {level.upper()}",
            description=message,
            color=LEVEL_COLORS.get(level, 0x808080),
            fields=fields,
            footer="Archive Backend Diagnostics"
        )

    def send_startup_notification(self, service_name: str = "Archive Backend", version: Optional[str] = None):
        details = {'Version': version} if version else {}
        self.send_diagnostic('info', service_name, 'Service started successfully', details)

    def send_error_notification(self, service: str, error: Exception, context: Optional[str] = None):
        details = {
            'Error Type': type(error).__name__,
            'Error Message': str(error)
        }
        if context:
            details['Context'] = context
        self.send_diagnostic('error', service, 'An error occurred', details)

    def post_published(self, post):
        tags = ", ".join(post.tags) if post.tags else "none"
        self.send_embed(
            title=f"📝 Published: {post.title}",
            description=post.excerpt,
            color=0x2ecc71,
            fields=[
                {'name': 'File', 'value': post.filename or post.id, 'inline': True},
                {'name': 'Access', 'value': post.access or "unset", 'inline': True},
                {'name': 'Tags', 'value': tags, 'inline': False}
            ]
        )

    def post_deleted(self, post_id: str):
        self.send_plaintext(f"🗑️ Deleted post `{post_id}`")

    def get_queue_size(self) -> int:
        return self.notification_queue.qsize()

    def is_healthy(self) -> bool:
        if not self.enabled:
            return False
        # The worker starts on first use, so an idle notifier is still healthy
        return not self._stop_worker.is_set() and (
            self._worker_thread is None or self._worker_thread.is_alive())

    def shutdown(self, timeout: float = 5.0):
        """Stop the worker after it drains the queue."""
        self._stop_worker.set()
        if self._worker_thread and self._worker_thread.is_alive():
            logger.info("Flushing Discord notifications")
            self._worker_thread.join(timeout=timeout)
