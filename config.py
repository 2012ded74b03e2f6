"""
Credential loading from the environment / a .env file.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from pocket_client import PocketClient

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT_URI = "pocketapp1234:authorizationFinished"


@dataclass
class PocketCredentials:
    consumer_key: str
    access_token: str = ""
    username: str = ""
    redirect_uri: str = DEFAULT_REDIRECT_URI

    def create_client(self, timeout: Optional[float] = None) -> PocketClient:
        if self.access_token:
            return PocketClient.with_access_token(
                self.consumer_key, self.access_token, self.username, timeout=timeout
            )
        return PocketClient(self.consumer_key, timeout=timeout)


def load_credentials(dotenv_path: Optional[str] = None) -> Optional[PocketCredentials]:
    """
    Read POCKET_* settings, after loading a .env file if one exists.

    Returns:
        PocketCredentials, or None when POCKET_CONSUMER_KEY is not set
    """
    load_dotenv(dotenv_path)

    consumer_key = os.getenv("POCKET_CONSUMER_KEY", "").strip()
    if not consumer_key:
        logger.error("POCKET_CONSUMER_KEY is not set")
        return None

    return PocketCredentials(
        consumer_key=consumer_key,
        access_token=os.getenv("POCKET_ACCESS_TOKEN", "").strip(),
        username=os.getenv("POCKET_USERNAME", "").strip(),
        redirect_uri=os.getenv("POCKET_REDIRECT_URI", "").strip() or DEFAULT_REDIRECT_URI,
    )
