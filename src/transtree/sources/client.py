"""Translation API client.

TranslationAPI is the transport the Source Resolver and Save Dispatcher talk
to. HttpTranslationAPI implements it over REST with httpx:

    GET  /translations/{language}     -> nested JSON tree
    PUT  /translations/{language}     <- {"translations": tree}
    GET  /translations/languages      -> {"languages": [...]}
    POST /translations/languages      <- {"language": ..., "baseLanguage": ...}

Error mapping:
    status >= 400          -> TranslationAPIError (message from body when present)
    connect error/timeout  -> TranslationConnectionError
    other httpx errors     -> TranslationConnectionError (redirect loops, bad encodings)
    undecodable body       -> TranslationAPIError

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, Self

import httpx

from transtree.constants import DEFAULT_TIMEOUT, LANGUAGES_ENDPOINT, TRANSLATIONS_ENDPOINT
from transtree.diagnostics import TranslationAPIError, TranslationConnectionError
from transtree.tree.types import LanguageCode

__all__ = ["HttpTranslationAPI", "TranslationAPI"]

logger = logging.getLogger(__name__)


class TranslationAPI(Protocol):
    """Remote source of truth for translation trees."""

    async def fetch(self, language: LanguageCode) -> Any:
        """Return the decoded JSON tree for language."""

    async def store(self, language: LanguageCode, tree_data: dict[str, Any]) -> str:
        """Persist a language's tree; return the server's confirmation message."""

    async def list_languages(self) -> list[LanguageCode]:
        """Return the languages the server knows about."""

    async def create_language(self, language: LanguageCode, base_language: LanguageCode) -> str:
        """Create a translation set for language seeded from base_language."""


class HttpTranslationAPI:
    """REST implementation of TranslationAPI on httpx.AsyncClient.

    The client is created lazily and reused; call aclose() (or use the
    instance as an async context manager) to release connections.

    Example:
        >>> async with HttpTranslationAPI("https://admin.example.com/api") as api:
        ...     tree_data = await api.fetch("es")

    Attributes:
        base_url: API root URL
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root URL
            timeout: Request timeout in seconds
            headers: Extra headers (e.g. Authorization) sent with every request
            transport: Custom httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._headers = {"Content-Type": "application/json", **(headers or {})}
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                headers=self._headers,
                transport=self._transport,
            )
        return self._http_client

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        client = self._get_http_client()
        try:
            response = await client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            logger.error("Request %s %s timed out: %s", method, path, e)
            msg = f"Request to translation API timed out after {self.timeout}s"
            raise TranslationConnectionError(msg) from e
        except httpx.TransportError as e:
            logger.error("Failed to reach translation API at %s: %s", self.base_url, e)
            msg = f"Unable to connect to translation API at {self.base_url}"
            raise TranslationConnectionError(msg) from e
        except httpx.HTTPError as e:
            logger.error("Request %s %s failed: %s", method, path, e)
            msg = f"Translation API request failed: {e}"
            raise TranslationConnectionError(msg) from e

        if response.status_code >= 400:
            detail = _error_message(response)
            raise TranslationAPIError(
                detail or f"Translation API error: {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            msg = f"Translation API returned a non-JSON body for {method} {path}"
            raise TranslationAPIError(msg, status_code=response.status_code) from e

    async def fetch(self, language: LanguageCode) -> Any:
        """GET the nested tree for language."""
        return await self._request("GET", TRANSLATIONS_ENDPOINT.format(language=language))

    async def store(self, language: LanguageCode, tree_data: dict[str, Any]) -> str:
        """PUT the nested tree for language."""
        data = await self._request(
            "PUT",
            TRANSLATIONS_ENDPOINT.format(language=language),
            json={"translations": tree_data},
        )
        return _body_message(data, "Translations saved successfully")

    async def list_languages(self) -> list[LanguageCode]:
        """GET the server's language list."""
        data = await self._request("GET", LANGUAGES_ENDPOINT)
        languages = data.get("languages") if isinstance(data, dict) else None
        if not isinstance(languages, list) or not all(isinstance(x, str) for x in languages):
            msg = "Translation API returned a malformed language list"
            raise TranslationAPIError(msg)
        return languages

    async def create_language(self, language: LanguageCode, base_language: LanguageCode) -> str:
        """POST a new language seeded from base_language."""
        data = await self._request(
            "POST",
            LANGUAGES_ENDPOINT,
            json={"language": language, "baseLanguage": base_language},
        )
        return _body_message(data, f"Language {language} created successfully")


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        message = body.get("message") or body.get("detail")
        if message:
            return str(message)
    return None


def _body_message(data: Any, default: str) -> str:
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return default
