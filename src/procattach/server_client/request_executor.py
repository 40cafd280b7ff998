"""Request execution logic for the server client."""

import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from ..exceptions import MalformedResponseError, ServerRequestError
from ..network_errors import TRANSPORT_ERROR_TYPES, describe_transport_error

logger = logging.getLogger(__name__)


def is_success_status(status: int) -> bool:
    return 200 <= status < 300


class RequestExecutor:
    """Execute a single HTTP request and translate failures into domain errors.

    No retries: every failure goes back to the caller, which decides whether
    the operator should try again.
    """

    def __init__(self, session_manager):
        self._session_manager = session_manager

    async def execute_request(
        self,
        method_upper: str,
        url: str,
        *,
        path: str,
        json_body: Optional[Dict[str, Any]] = None,
        expect_json: bool = True,
    ) -> Any:
        """Send the request; return the decoded JSON body, or None when no body is expected."""
        await self._session_manager.initialize()
        session = self._session_manager.get_session()
        request_kwargs: Dict[str, Any] = {}
        if json_body is not None:
            request_kwargs["json"] = json_body
        try:
            async with session.request(method_upper, url, **request_kwargs) as response:
                if not is_success_status(response.status):
                    logger.warning("%s %s returned HTTP %d", method_upper, path, response.status)
                    raise ServerRequestError(path=path, status=response.status)
                if not expect_json:
                    return None
                return await self._parse_json_response(response, path=path)
        except TRANSPORT_ERROR_TYPES as exc:
            detail = describe_transport_error(exc)
            logger.warning("%s %s failed: %s", method_upper, path, detail)
            raise ServerRequestError(f"Request to {path} failed: {detail}", path=path) from exc

    async def _parse_json_response(self, response: aiohttp.ClientResponse, *, path: str) -> Any:
        try:
            return await response.json(content_type=None)
        except (aiohttp.ContentTypeError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MalformedResponseError(f"Response from {path} was not valid JSON", path=path) from exc
