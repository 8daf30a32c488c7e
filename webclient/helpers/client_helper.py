"""Authenticated HTTP wrapper for calling the protected web API."""

import json
import logging
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic_core import to_json

from webclient.config.schema import AzureAdOptions
from webclient.helpers.errors import AuthenticationError
from webclient.helpers.token_provider import ClientCredentialsTokenProvider, TokenProvider

logger = logging.getLogger(__name__)

AUTHENTICATION_SCHEME = "Bearer"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"

# 400 and 502 are unreachable after the 2xx check; only 204 takes effect.
EXCLUDED_SUCCESS_STATUSES = frozenset({400, 502, 204})


def json_content(payload: Any) -> bytes:
    """Serialize a request payload to a UTF-8 JSON body."""
    return to_json(payload, by_alias=True)


class HttpClientHelper:
    """Calls one web API address with a bearer token fetched at construction.

    The token is acquired synchronously in ``__init__`` and reused for every
    request this instance makes; it is never refreshed. Create one instance
    per caller and discard it after use.

    Every request opens its own ``httpx.AsyncClient`` for a single
    request/response cycle. Responses are classified the same way for all
    verbs:

    - 2xx other than 204: a non-empty body is deserialized, an empty body
      yields ``default``.
    - 204: ``default``, whatever the body.
    - anything else: :class:`AuthenticationError` with the URL and status.
    """

    def __init__(
        self,
        web_service_url: str,
        configuration: AzureAdOptions,
        token_provider: TokenProvider | None = None,
    ):
        self._web_service_url = web_service_url
        self.ad_configuration = configuration
        if token_provider is None:
            token_provider = ClientCredentialsTokenProvider(configuration)
        self._access_token = token_provider.get_access_token()

    @property
    def web_service_url(self) -> str:
        return self._web_service_url

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"{AUTHENTICATION_SCHEME} {self._access_token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {}
        if self.ad_configuration.timeout is not None:
            kwargs["timeout"] = self.ad_configuration.timeout
        return httpx.AsyncClient(
            headers=self._headers(),
            trust_env=self.ad_configuration.use_ambient_credentials,
            **kwargs,
        )

    async def _send(
        self,
        method: str,
        url: str,
        payload: Any = None,
        has_body: bool = False,
    ) -> httpx.Response:
        content = json_content(payload) if has_body else None
        headers = {"Content-Type": JSON_CONTENT_TYPE} if has_body else None
        logger.debug("%s %s", method, url)
        try:
            async with self._client() as client:
                return await client.request(method, url, content=content, headers=headers)
        except httpx.RequestError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise AuthenticationError(
                f"Endpoint {url} request failed: {e}", url=url
            ) from e

    @staticmethod
    def _read(
        resp: httpx.Response,
        url: str,
        response_type: Any,
        default: Any,
    ) -> Any:
        status = resp.status_code
        if resp.is_success and status not in EXCLUDED_SUCCESS_STATUSES:
            contents = resp.text
            if contents:
                if response_type is None:
                    return json.loads(contents)
                return TypeAdapter(response_type).validate_json(contents)
            return default
        if status == httpx.codes.NO_CONTENT:
            return default

        logger.error("Endpoint %s returned status code: %d", url, status)
        raise AuthenticationError(
            f"Endpoint {url} returned status code: {status}",
            url=url,
            status_code=status,
        )

    async def get_item(
        self,
        query: str | None = "",
        response_type: Any = None,
        default: Any = None,
    ) -> Any:
        """GET the service address, appending ``?query`` when one is given."""
        uri = self._web_service_url if not query else f"{self._web_service_url}?{query}"
        resp = await self._send("GET", uri)
        return self._read(resp, uri, response_type, default)

    async def post_item(
        self,
        payload: Any,
        response_type: Any = None,
        default: Any = None,
    ) -> Any:
        """POST ``payload`` as JSON to the service address."""
        uri = self._web_service_url
        resp = await self._send("POST", uri, payload, has_body=True)
        return self._read(resp, uri, response_type, default)

    async def put_item(
        self,
        uri: str,
        payload: Any,
        response_type: Any = None,
        default: Any = None,
    ) -> Any:
        """Send ``payload`` as JSON to ``uri``.

        Issues POST rather than PUT while ``legacy_put_as_post`` is set, which
        is what the deployed service expects.
        """
        method = "POST" if self.ad_configuration.legacy_put_as_post else "PUT"
        resp = await self._send(method, uri, payload, has_body=True)
        return self._read(resp, uri, response_type, default)
