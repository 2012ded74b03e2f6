#!/usr/bin/env python3
"""
Pocket API client.
Handles the OAuth token exchange and the retrieve / add / modify endpoints.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import requests
from requests import Session

from errors import MissingAccessTokenError, PocketError
from request_builders import AddRequest, ModifyRequest, RetrieveRequest
from response_handler import (
    decode_json_object,
    decode_query_string,
    first_value,
    handle_response,
)

logger = logging.getLogger(__name__)

# auth API URLs
REQUEST_TOKEN_URL = "https://getpocket.com/v3/oauth/request"
ACCESS_TOKEN_URL = "https://getpocket.com/v3/oauth/authorize"
AUTHORIZATION_URL = "https://getpocket.com/auth/authorize"

# item API URLs
RETRIEVE_URL = "https://getpocket.com/v3/get"
ADD_URL = "https://getpocket.com/v3/add"
MODIFY_URL = "https://getpocket.com/v3/send"

JSON_HEADERS = {
    "Content-Type": "application/json; charset=UTF-8",
    "X-Accept": "application/json",
}


def _mask(token: str) -> str:
    return f"{token[:4]}..." if token else "<empty>"


class PocketClient:
    """
    Client for one Pocket application and, once authenticated, one user.

    Not safe to share across threads while fetch_access_token() runs.
    """

    def __init__(
        self,
        consumer_key: str,
        access_token: str = "",
        username: str = "",
        session: Optional[Session] = None,
        timeout: Optional[float] = None,
    ):
        if not consumer_key:
            raise PocketError("consumer key is required")
        self.consumer_key = consumer_key
        self.access_token = access_token
        self.username = username
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    @classmethod
    def with_access_token(
        cls,
        consumer_key: str,
        access_token: str,
        username: str = "",
        session: Optional[Session] = None,
        timeout: Optional[float] = None,
    ) -> "PocketClient":
        """Create a client for a user who has already been authorized."""
        return cls(
            consumer_key,
            access_token=access_token,
            username=username,
            session=session,
            timeout=timeout,
        )

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)

    # OAuth flow

    def new_request_token(self, redirect_uri: str, timeout: Optional[float] = None) -> str:
        """
        Step 1: obtain a request token.

        Args:
            redirect_uri: Where Pocket sends the user after authorization
            timeout: Seconds for this call, overriding the client's timeout

        Returns:
            The request token ("code" field of the response)
        """
        data = {"consumer_key": self.consumer_key, "redirect_uri": redirect_uri}
        values = decode_query_string(self._post_form(REQUEST_TOKEN_URL, data, timeout))
        request_token = first_value(values, "code")
        logger.info(f"Obtained request token {_mask(request_token)}")
        return request_token

    def get_authorization_url(self, request_token: str, redirect_uri: str) -> str:
        """Step 2: URL the user visits to authorize this application."""
        query = urlencode({"redirect_uri": redirect_uri, "request_token": request_token})
        return f"{AUTHORIZATION_URL}?{query}"

    def fetch_access_token(self, request_token: str, timeout: Optional[float] = None) -> str:
        """
        Step 3: exchange an authorized request token for an access token.

        Stores access_token and username on the client.

        Returns:
            The access token
        """
        data = {"consumer_key": self.consumer_key, "code": request_token}
        values = decode_query_string(self._post_form(ACCESS_TOKEN_URL, data, timeout))
        self.access_token = first_value(values, "access_token")
        self.username = first_value(values, "username")
        logger.info(
            f"Obtained access token {_mask(self.access_token)} for user '{self.username}'"
        )
        return self.access_token

    # Item endpoints

    def retrieve(self, req: RetrieveRequest, timeout: Optional[float] = None) -> Dict[str, Any]:
        """Fetch saved items matching the request's filters."""
        self._verify_access_token()
        params = dict(req.params)
        params.update(self._credentials())
        return self._post_json(RETRIEVE_URL, params, timeout)

    def add(self, req: AddRequest, timeout: Optional[float] = None) -> Dict[str, Any]:
        """Save a new item."""
        self._verify_access_token()
        params = self._credentials()
        params.update(req.to_params())
        return self._post_json(ADD_URL, params, timeout)

    def modify(self, req: ModifyRequest, timeout: Optional[float] = None) -> Dict[str, Any]:
        """
        Apply a batch of actions in order.

        The result carries per-action outcomes under "action_results".
        """
        self._verify_access_token()
        actions_json = json.dumps(req.to_list(), separators=(",", ":"))
        params = self._credentials()
        params["actions"] = actions_json

        logger.debug(f"GET {MODIFY_URL} with {len(req)} action(s)")
        response = self.session.get(
            MODIFY_URL, params=params, timeout=self._timeout(timeout)
        )
        return decode_json_object(handle_response(response))

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    # private methods

    def _credentials(self) -> Dict[str, str]:
        return {"consumer_key": self.consumer_key, "access_token": self.access_token}

    def _verify_access_token(self) -> None:
        if not self.access_token:
            raise MissingAccessTokenError()

    def _timeout(self, timeout: Optional[float]) -> Optional[float]:
        return timeout if timeout is not None else self.timeout

    def _post_form(
        self, url: str, data: Dict[str, str], timeout: Optional[float] = None
    ) -> bytes:
        logger.debug(f"POST {url} (form)")
        response = self.session.post(url, data=data, timeout=self._timeout(timeout))
        return handle_response(response)

    def _post_json(
        self, url: str, params: Dict[str, str], timeout: Optional[float] = None
    ) -> Dict[str, Any]:
        logger.debug(f"POST {url} (json, {len(params)} params)")
        response = self.session.post(
            url,
            json=params,
            headers=JSON_HEADERS,
            timeout=self._timeout(timeout),
        )
        return decode_json_object(handle_response(response))
