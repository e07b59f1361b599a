"""Base HTTP client with retry logic for onionlayer."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx

from ..errors import (
    ApiError,
    DuplicateNodeError,
    InvalidRequestError,
    NetworkError,
    NodeNotFoundError,
)
from ..types import ClientConfig

logger = logging.getLogger("onionlayer")


class BaseApiClient:
    """Base HTTP client for the directory API with automatic retry logic.

    Attributes:
        config: Client configuration.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the base API client.

        Args:
            config: Client configuration.
        """
        self.config = config
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        Returns:
            The HTTP client instance.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={"Content-Type": "application/json"},
                timeout=httpx.Timeout(self.config.timeout / 1000),
                transport=self.config.transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make an HTTP request with retry logic.

        Args:
            method: HTTP method (GET, POST).
            path: API path.
            json: JSON body for the request.
            params: Query parameters.

        Returns:
            The HTTP response.

        Raises:
            ApiError: If the request fails after all retries.
            NetworkError: If there's a network communication failure.
            NodeNotFoundError: If the node is not found.
            DuplicateNodeError: If the node is already registered.
            InvalidRequestError: If the directory rejected the request as malformed.
        """
        client = await self._get_client()
        last_error: Exception | None = None

        for attempt in range(self.config.max_retries + 1):
            try:
                response = await client.request(method, path, json=json, params=params)

                if (
                    response.status_code in self.config.retry_on_status_codes
                    and attempt < self.config.max_retries
                ):
                    delay = self.config.retry_delay * (2**attempt) / 1000
                    logger.debug(
                        "%s %s returned %s, retrying in %.3fs",
                        method,
                        path,
                        response.status_code,
                        delay,
                    )
                    await asyncio.sleep(delay)
                    continue

                if response.status_code >= 400:
                    self._handle_error_response(response)

                return response

            except (httpx.ConnectError, httpx.TimeoutException, httpx.NetworkError) as e:
                last_error = e
                if attempt < self.config.max_retries:
                    delay = self.config.retry_delay * (2**attempt) / 1000
                    logger.debug("%s %s failed (%s), retrying in %.3fs", method, path, e, delay)
                    await asyncio.sleep(delay)
                    continue
                raise NetworkError(f"Network error: {e}") from e

        if last_error:  # pragma: no cover
            raise NetworkError(
                f"Request failed after {self.config.max_retries} retries"
            ) from last_error
        raise NetworkError(
            f"Request failed after {self.config.max_retries} retries"
        )  # pragma: no cover

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Handle HTTP error responses.

        Args:
            response: The HTTP response.

        Raises:
            NodeNotFoundError: On 404.
            DuplicateNodeError: On 409.
            InvalidRequestError: On 400 or 422.
            ApiError: For other API errors.
        """
        try:
            data = response.json()
            message = data.get("message", data.get("error", response.text))
        except (ValueError, json.JSONDecodeError, AttributeError):
            message = response.text or f"HTTP {response.status_code}"

        if response.status_code == 404:
            raise NodeNotFoundError(message)
        if response.status_code == 409:
            raise DuplicateNodeError(message)
        if response.status_code in (400, 422):
            raise InvalidRequestError(message)

        raise ApiError(response.status_code, message)
