"""
Response decoding shared by every Pocket API call.
Failures are signalled by the X-Error-Code / X-Error headers, not the body.
"""

import json
import logging
import re
from typing import Any, Dict, List
from urllib.parse import parse_qs

from requests import Response

from errors import PocketAPIError, PocketParseError

logger = logging.getLogger(__name__)

SUCCESS_STATUS = 200
ERROR_CODE_HEADER = "X-Error-Code"
ERROR_MESSAGE_HEADER = "X-Error"

# "%" not followed by two hex digits
INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def handle_response(response: Response) -> bytes:
    """
    Read the full response body and check the status.

    The response is closed whether or not the read succeeds.

    Returns:
        Raw body bytes for a 200 response

    Raises:
        PocketAPIError: for any other status
    """
    try:
        body = response.content
    finally:
        response.close()

    if response.status_code == SUCCESS_STATUS:
        return body

    error_code = 0
    error_code_str = response.headers.get(ERROR_CODE_HEADER, "")
    if error_code_str:
        try:
            error_code = int(error_code_str)
        except ValueError:
            logger.warning(f"Ignoring non-numeric {ERROR_CODE_HEADER}: {error_code_str!r}")
    error_msg = response.headers.get(ERROR_MESSAGE_HEADER, "")

    logger.error(
        f"Pocket API request failed with status {response.status_code} "
        f"(error {error_code}: {error_msg})"
    )
    raise PocketAPIError(response.status_code, error_code, error_msg, body)


def decode_json_object(body: bytes) -> Dict[str, Any]:
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PocketParseError(str(e), body) from e

    if not isinstance(data, dict):
        raise PocketParseError(
            f"expected a JSON object, got {type(data).__name__}", body
        )
    return data


def decode_query_string(body: bytes) -> Dict[str, List[str]]:
    """Decode a form-encoded body such as ``code=abc&state=x``."""
    try:
        text = body.decode("utf-8")
        bad_escape = INVALID_ESCAPE.search(text)
        if bad_escape:
            raise ValueError(
                f"invalid URL escape {text[bad_escape.start():bad_escape.start() + 3]!r}"
            )
        return parse_qs(text, keep_blank_values=True, errors="strict")
    except (UnicodeDecodeError, ValueError) as e:
        raise PocketParseError(str(e), body) from e


def first_value(values: Dict[str, List[str]], key: str) -> str:
    """First value for ``key``, or "" when absent."""
    found = values.get(key)
    return found[0] if found else ""
