from __future__ import annotations

from typing import Dict

import httpx
from loguru import logger

from opening_notifier.config import get_settings
from opening_notifier.errors import FetchFailure


class StorepointClient:
    """Fetch business hours for a location from the Storepoint API."""

    def __init__(self):
        settings = get_settings()
        self.url_prefix = settings.storepoint_url_prefix
        self.timeout = settings.http_timeout

    def location_url(self, location_id: int) -> str:
        return f"{self.url_prefix}{location_id}"

    def fetch_hours(self, location_id: int) -> Dict[str, str]:
        """Get the weekday -> hours text map for a location.

        Args:
            location_id: Storepoint location ID.

        Returns:
            Dict keyed by lowercase weekday ("monday"), values as returned upstream.

        Raises:
            FetchFailure: network error, non-2xx status, or an unexpected payload.
        """
        url = self.location_url(location_id)

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url)
                response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise FetchFailure(f"{e.response.status_code}: could not access {url}") from e
        except httpx.RequestError as e:
            raise FetchFailure(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise FetchFailure(f"Invalid JSON from {url}: {e}") from e

        if not isinstance(data, dict) or not data.get("success"):
            raise FetchFailure(f"Unexpected response: {data}")

        results = data.get("results")
        location = results.get("location") if isinstance(results, dict) else None
        if not isinstance(location, dict):
            raise FetchFailure(f"Response has no location hours: {data}")

        logger.info("Successfully received a response from storepoint")
        return location
