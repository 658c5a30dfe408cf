"""
Platform services the workflow can hand a finished poster to.

Saving is always available. Sharing is optional: the workflow asks the share
target whether it is usable and hides the action when it is not.
"""
import logging
import os
from typing import Optional, Protocol

import requests

from .schemas import SharePayload

logger = logging.getLogger(__name__)


class FileSaver(Protocol):
    def save(self, url: str, filename: str) -> str: ...


class ShareTarget(Protocol):
    def is_available(self) -> bool: ...

    def share(self, payload: SharePayload) -> None: ...


class DiskSaver:
    def __init__(self, directory: str, session: Optional[requests.Session] = None, timeout: int = 60):
        self.directory = os.path.abspath(directory)
        self.timeout = timeout
        self._session = session or requests.Session()

    def save(self, url: str, filename: str) -> str:
        """Stream the image at ``url`` into the download directory and return its path."""
        os.makedirs(self.directory, exist_ok=True)
        path = os.path.join(self.directory, os.path.basename(filename))
        with self._session.get(url, stream=True, timeout=self.timeout) as response:
            response.raise_for_status()
            try:
                with open(path, "wb") as file:
                    for chunk in response.iter_content(chunk_size=8192):
                        file.write(chunk)
            except Exception:
                # no half-written posters left in the download directory
                if os.path.exists(path):
                    os.remove(path)
                raise
        logger.info("Saved poster to %s", path)
        return path


class WebhookShareTarget:
    def __init__(self, webhook_url: Optional[str], session: Optional[requests.Session] = None, timeout: int = 10):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._session = session or requests.Session()

    def is_available(self) -> bool:
        return bool(self.webhook_url)

    def share(self, payload: SharePayload) -> None:
        response = self._session.post(
            self.webhook_url,
            json=payload.model_dump(),
            timeout=self.timeout,
        )
        response.raise_for_status()


def share_target_from_settings(settings) -> Optional[WebhookShareTarget]:
    if not settings.share_webhook_url:
        return None
    return WebhookShareTarget(settings.share_webhook_url)
