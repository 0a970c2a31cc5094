"""
Request builder for the Tebex Headless API.

Every endpoint wrapper goes through ``HeadlessHttpClient.request``:
- builds ``<base_url>/api/<route>/<identifier><path>``
- turns boolean query params into 1/0 and drops None ones
- attaches basic auth when both the webstore identifier and private key are set
- raises HeadlessAPIError on non-2xx; transport errors are left to httpx

No retries, no caching, no envelope unwrapping.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from tebex_headless.errors import HeadlessAPIError, HeadlessConfigurationError, HeadlessResponseError

logger = logging.getLogger(__name__)

BASE_URL = "https://headless.tebex.io"

Scalar = Union[str, int, float, bool, None]


class Route(str, Enum):
    ACCOUNTS = "accounts"
    BASKETS = "baskets"


def normalize_params(params: Optional[Mapping[str, Scalar]]) -> Optional[Dict[str, Union[str, int, float]]]:
    """Return a copy of ``params`` with booleans as 1/0 and None values removed."""
    if not params:
        return None
    out: Dict[str, Union[str, int, float]] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            out[key] = 1 if value else 0
        else:
            out[key] = value
    return out or None


class HeadlessHttpClient:
    def __init__(
        self,
        webstore_identifier: Optional[str] = None,
        private_key: Optional[str] = None,
        base_url: str = BASE_URL,
        timeout_seconds: float = 20.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.webstore_identifier = webstore_identifier
        self.private_key = private_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._http_client = http_client

    def set_webstore_identifier(self, identifier: Optional[str]) -> None:
        self.webstore_identifier = identifier

    def set_private_key(self, key: Optional[str]) -> None:
        self.private_key = key

    def _auth(self) -> Optional[httpx.BasicAuth]:
        # Read at call time so a credential change applies to the next request.
        if self.webstore_identifier and self.private_key:
            return httpx.BasicAuth(self.webstore_identifier, self.private_key)
        return None

    def build_url(self, identifier: Optional[str], route: Union[Route, str], path: Optional[str] = None) -> str:
        route = Route(route)
        if not identifier:
            if route is Route.BASKETS:
                raise HeadlessConfigurationError("A basket identifier is required for the 'baskets' route.")
            raise HeadlessConfigurationError(
                "A webstore identifier is required for the 'accounts' route; set the webstore identifier first."
            )
        return f"{self.base_url}/api/{route.value}/{identifier}{path or ''}"

    async def request(
        self,
        method: str,
        identifier: Optional[str],
        route: Union[Route, str],
        path: Optional[str] = None,
        params: Optional[Mapping[str, Scalar]] = None,
        body: Optional[Any] = None,
    ) -> Any:
        """
        Send one request and return the parsed JSON body (None when empty).

        Raises:
            HeadlessConfigurationError: identifier missing
            HeadlessAPIError: remote answered with a non-2xx status
            HeadlessResponseError: 2xx body is not JSON
            httpx.RequestError: network failure or timeout
        """
        method = method.upper()
        url = self.build_url(identifier, route, path)
        kwargs: Dict[str, Any] = {
            "params": normalize_params(params),
            "headers": {"Accept": "application/json"},
        }
        if body is not None:
            kwargs["json"] = body
        auth = self._auth()
        if auth is not None:
            kwargs["auth"] = auth

        logger.debug("%s %s", method, url)
        if self._http_client is not None:
            response = await self._http_client.request(method, url, **kwargs)
        else:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.request(method, url, **kwargs)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Tebex Headless API error: %s %s -> %s %s", method, url, response.status_code, response.text)
            raise HeadlessAPIError.from_response(response) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error("Tebex Headless API returned a non-JSON body: %s %s -> %s", method, url, response.status_code)
            raise HeadlessResponseError("Response body is not JSON.", payload=response.text) from e
