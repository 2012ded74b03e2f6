#!/usr/bin/env python3
"""
Pocket API example
Authorizes (if needed), then retrieves, adds and favorites items.
"""

import sys
import logging
from typing import Optional

import requests

from config import load_credentials
from errors import PocketError
from models import Action
from pocket_client import PocketClient
from request_builders import AddRequest, ModifyRequest, RetrieveRequest

logger = logging.getLogger(__name__)


def authenticate(client: PocketClient, redirect_uri: str) -> None:
    """Walk the user through the three-step OAuth flow."""
    request_token = client.new_request_token(redirect_uri)
    logger.info("Fetched request token")

    print("Visit this URL to authorize the app:")
    print(client.get_authorization_url(request_token, redirect_uri))
    input("Press Enter after authorizing...")

    client.fetch_access_token(request_token)


def run(
    count: int = 5,
    add_url: Optional[str] = None,
    add_title: Optional[str] = None,
    favorite_id: Optional[str] = None,
) -> int:
    credentials = load_credentials()
    if not credentials:
        logger.error("No Pocket credentials configured. Exiting.")
        return 1

    with credentials.create_client() as client:
        try:
            if not client.is_authenticated:
                authenticate(client, credentials.redirect_uri)
            logger.info(f"Authenticated as '{client.username or 'unknown user'}'")

            result = client.retrieve(RetrieveRequest().simple_item_info().count(count))
            items = result.get("list") or {}
            logger.info(f"Retrieved {len(items)} item(s)")
            for item_id, item in items.items():
                title = item.get("resolved_title") or item.get("given_title") or "No title"
                print(f"- [{item_id}] {title}")

            if add_url:
                req = AddRequest(add_url)
                if add_title:
                    req.set_title(add_title)
                result = client.add(req)
                logger.info(f"Add response: {result}")

            if favorite_id:
                result = client.modify(ModifyRequest().add_action(Action.favorite(favorite_id)))
                logger.info(f"Modify response: {result}")

        except PocketError as e:
            logger.error(f"Pocket API error: {e}")
            return 1
        except requests.RequestException as e:
            logger.error(f"Network error: {e}")
            return 1

    return 0


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Pocket API example")
    parser.add_argument("--count", type=int, default=5, help="Items to retrieve (default: 5)")
    parser.add_argument("--add-url", help="URL to save")
    parser.add_argument("--add-title", help="Title for --add-url")
    parser.add_argument("--favorite-id", help="Item id to mark as favorite")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sys.exit(
        run(
            count=args.count,
            add_url=args.add_url,
            add_title=args.add_title,
            favorite_id=args.favorite_id,
        )
    )


if __name__ == "__main__":
    main()
