from __future__ import annotations

import httpx
from loguru import logger

from opening_notifier.config import get_settings

DISCORD_WEBHOOK_BASE = "https://discord.com/api/webhooks"
SEND_MESSAGE_TIMEOUT = 10  # seconds


class DiscordSender:
    """Send messages via Discord Webhook."""

    def __init__(self):
        settings = get_settings()
        self.webhook_id = settings.discord_webhook_id
        self.webhook_token = settings.discord_webhook_token

    @classmethod
    def is_configured(cls) -> bool:
        """Check if Discord webhook credentials are set."""
        settings = get_settings()
        return bool(settings.discord_webhook_id and settings.discord_webhook_token)

    @property
    def webhook_url(self) -> str:
        return f"{DISCORD_WEBHOOK_BASE}/{self.webhook_id}/{self.webhook_token}"

    def send(self, text: str) -> bool:
        """Send a message to the configured Discord webhook.

        Args:
            text: Plain text content.

        Returns:
            True if sent successfully, False otherwise.
        """
        if not text:
            logger.warning("Discord send called with no content")
            return False

        try:
            with httpx.Client(timeout=SEND_MESSAGE_TIMEOUT) as client:
                response = client.post(self.webhook_url, json={"content": text})
                response.raise_for_status()

            logger.info("Discord webhook message sent")
            return True
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Discord webhook error: {e.response.status_code} - {e.response.text}"
            )
            return False
        except httpx.RequestError as e:
            logger.error(f"Discord webhook request failed: {e}")
            return False
