# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import json
import logging
from dataclasses import dataclass
from typing import Any, cast
from urllib.parse import urlsplit

import httpx

from shopify_sdk.api_types import (
    ACCESS_TOKEN_HEADER,
    DEFAULT_API_VERSION,
    REQUEST_ID_HEADER,
    ListResult,
)
from shopify_sdk.metadata import Metadata

logger = logging.getLogger(__name__)

DEPRECATION_HEADER = "X-Shopify-API-Deprecated-Reason"


@dataclass
class ApiClientConfig:
    """Holds configuration options related to the generic API client.

    Attributes:
        http2 (bool): Whether to use HTTP/2 for requests. Default to False.
        access_token (Optional[str]): Access token of the shop, sent with every request. Default to None.
        api_version (Optional[str]): Admin API version, e.g. '2024-10'. When None the unversioned `/admin/` path is
            used. Default to `DEFAULT_API_VERSION`.
        timeout (float): Timeout in seconds applied to connect, read and write operations. Default to 60.
        transport (Optional[httpx.AsyncBaseTransport]): Custom transport handed to `httpx.AsyncClient`, e.g. a
            `httpx.MockTransport`. Default to None.

    """

    http2: bool = False
    access_token: str | None = None
    api_version: str | None = DEFAULT_API_VERSION
    timeout: float = 60.0
    transport: httpx.AsyncBaseTransport | None = None

    def raise_if_access_token_not_exists(self):
        """Raise an error if the access token is not set.

        Raises:
            AccessTokenNotSpecifiedError: If `self.access_token` is missing or None.

        """
        if not self.access_token:
            raise AccessTokenNotSpecifiedError


def build_shop_url(shop_url: str, api_version: str | None = DEFAULT_API_VERSION) -> str:
    """Builds the admin base URL of a shop.

    Args:
        shop_url (str): The shop's domain, e.g. 'my-shop.myshopify.com'. A scheme and path are tolerated, the path is
            discarded.
        api_version (str | None): Admin API version. Default to `DEFAULT_API_VERSION`.

    Returns:
        str: Base URL ending with a slash, e.g. 'https://my-shop.myshopify.com/admin/api/2024-10/'.

    """
    if "://" not in shop_url:
        shop_url = f"https://{shop_url}"
    parts = urlsplit(shop_url)
    if not parts.netloc:
        raise ValueError(f"Invalid shop url: {shop_url}")
    path = "/admin/" if api_version is None else f"/admin/api/{api_version}/"
    return f"{parts.scheme}://{parts.netloc}{path}"


class ApiClient:
    """A generic API client for making HTTP requests against a shop's Admin REST API.

    Attributes:
        _client (httpx.AsyncClient): HTTP client to send the http request.
        base_url (str): The admin base URL of the shop.
        api_client_config (ApiClientConfig): Configuration options for API client.

    """

    _client: httpx.AsyncClient
    base_url: str
    api_client_config: ApiClientConfig

    def __init__(self, shop_url: str, api_client_config: ApiClientConfig | None = None):
        """Initializes the API client.

        Args:
            shop_url (str): The shop's domain, e.g. 'my-shop.myshopify.com'.
            api_client_config (ApiClientConfig): Configuration options for API client. Default to None.

        """
        api_client_config = api_client_config or ApiClientConfig()
        self.base_url = build_shop_url(shop_url, api_client_config.api_version)
        limits = httpx.Limits()
        timeout = httpx.Timeout(api_client_config.timeout, pool=None)
        headers = {
            Metadata.SHOPIFY_HEADER: Metadata.get_shopify_header_val(),
            "Accept": "application/json",
        }
        self._client = httpx.AsyncClient(
            http2=api_client_config.http2,
            limits=limits,
            timeout=timeout,
            headers=headers,
            transport=api_client_config.transport,
        )
        self.api_client_config = api_client_config

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        """Closes the HTTP client session."""
        await self._client.aclose()

    def prepare_request(self, endpoint: str) -> httpx.URL:
        """Resolves an endpoint relative to the shop's admin base URL.

        Args:
            endpoint (str): Endpoint such as 'events/count.json'.

        Returns:
            httpx.URL: Absolute URL of the endpoint.

        """
        return httpx.URL(self.base_url + endpoint.lstrip("/"))

    async def get(
        self,
        endpoint: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        strict_mode: bool | None = True,
    ) -> httpx.Response:
        """Performs an asynchronous GET request.

        Args:
            endpoint (str): Endpoint to call.
            headers (dict[str, str] | None): Optional headers. Default to None.
            params (dict[str, Any] | None): Optional query parameters. Default to None.
            strict_mode (bool | None): If enabled then raises an error when request response status
                code is not 2xx. Default to True.

        Returns:
            httpx.Response: The response from the server.

        """
        return await self._send(
            "GET", endpoint, params=params, headers=headers, strict_mode=strict_mode
        )

    async def post(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        data: dict[str, Any] | bytes | None = None,
        strict_mode: bool | None = True,
    ) -> httpx.Response:
        """Performs an asynchronous POST request.

        Args:
            endpoint (str): API endpoint.
            params (dict[str, Any] | None): Query parameters. Default to None.
            headers (dict[str, Any] | None): Request headers. Default to None.
            data (dict[str, Any] | bytes | None): POST body data. Default to None.
            strict_mode (bool | None): If enabled then raises an error when request response status code is not 2xx.
                Default to True.

        Returns:
            httpx.Response: The response from the server.

        """
        return await self._send(
            "POST",
            endpoint,
            params=params,
            headers=headers,
            data=data,
            strict_mode=strict_mode,
        )

    async def put(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        data: dict[str, Any] | bytes | None = None,
        strict_mode: bool | None = True,
    ) -> httpx.Response:
        """Performs an asynchronous PUT request. Arguments are the same as `post`."""
        return await self._send(
            "PUT",
            endpoint,
            params=params,
            headers=headers,
            data=data,
            strict_mode=strict_mode,
        )

    async def delete(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        strict_mode: bool | None = True,
    ) -> httpx.Response:
        """Performs an asynchronous DELETE request. Arguments are the same as `get`."""
        return await self._send(
            "DELETE", endpoint, params=params, headers=headers, strict_mode=strict_mode
        )

    async def execute_request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Sends a request and raises `ApiError` on any non-2xx response.

        Args:
            method (str): HTTP verb.
            endpoint (str): Endpoint to call.
            params (dict[str, Any] | None): Query parameters. Default to None.
            data (dict[str, Any] | None): JSON body. Default to None.

        Returns:
            httpx.Response: The response from the server.

        Raises:
            ValueError: If `method` is not one of GET, POST, PUT or DELETE.

        """
        method = method.upper()
        if method == "GET":
            return await self.get(endpoint, params=params)
        if method == "POST":
            return await self.post(endpoint, params=params, data=data)
        if method == "PUT":
            return await self.put(endpoint, params=params, data=data)
        if method == "DELETE":
            return await self.delete(endpoint, params=params)
        raise ValueError(f"Unsupported HTTP method: {method}")

    async def execute_and_unwrap(
        self,
        method: str,
        endpoint: str,
        root_key: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        """Sends a request and returns the value found under `root_key` in the JSON response body.

        Raises:
            ApiError: If the response status code is not 2xx.
            MalformedResponseError: If the body is not a JSON object holding `root_key`.

        """
        response = await self.execute_request(method, endpoint, params=params, data=data)
        return self.unwrap(response, root_key)

    async def execute_list_and_unwrap(
        self,
        endpoint: str,
        root_key: str,
        params: dict[str, Any] | None = None,
    ) -> ListResult:
        """Sends a GET request to a list endpoint and returns its records along with the pagination cursors.

        Args:
            endpoint (str): List endpoint, e.g. 'events.json'.
            root_key (str): Plural envelope key, e.g. 'events'.
            params (dict[str, Any] | None): Query parameters. Default to None.

        Returns:
            ListResult: Records and the cursors parsed from the `Link` header.

        """
        response = await self.execute_request("GET", endpoint, params=params)
        items = self.unwrap(response, root_key)
        if not isinstance(items, list):
            raise MalformedResponseError(root_key, response.text)
        links = response.links
        return ListResult(
            items=items,
            link_header=response.headers.get("Link"),
            next_page_info=_page_info(links.get("next")),
            previous_page_info=_page_info(links.get("previous")),
        )

    @staticmethod
    def unwrap(response: httpx.Response, root_key: str) -> Any:
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(root_key, response.text) from e
        if not isinstance(body, dict) or root_key not in body:
            raise MalformedResponseError(root_key, response.text)
        return body[root_key]

    async def _send(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, Any] | None = None,
        data: dict[str, Any] | bytes | None = None,
        strict_mode: bool | None = True,
    ) -> httpx.Response:
        params = params or {}
        params = {key: val for key, val in params.items() if val is not None}
        headers = dict(headers or {})

        if self.api_client_config.access_token:
            headers[ACCESS_TOKEN_HEADER] = self.api_client_config.access_token

        content: str | bytes | None = None
        if data is not None:
            if not isinstance(data, bytes):
                headers["Content-Type"] = "application/json"
                content = json.dumps(data)
            else:
                content = cast(bytes, data)

        url = self.prepare_request(endpoint)
        logger.debug("%s %s params=%s", method, url, params)
        response = await self._client.request(
            method, url, params=params, headers=headers, content=content
        )
        logger.debug("%s %s -> %s", method, url, response.status_code)

        deprecation = response.headers.get(DEPRECATION_HEADER)
        if deprecation:
            logger.warning("%s %s is deprecated: %s", method, url, deprecation)

        if strict_mode and not response.is_success:
            raise ApiError.from_response(response)
        return response


def _page_info(link: dict[str, str] | None) -> str | None:
    if not link or "url" not in link:
        return None
    return httpx.URL(link["url"]).params.get("page_info")


class ApiError(Exception):
    """Exception raised when the API returns a non-2xx response.

    Attributes:
        status_code (int): The HTTP status code returned.
        errors (Any): The `errors` (or `error`) payload of the response body, when it is JSON.
        request_id (str | None): Value of the `X-Request-Id` response header, useful when contacting support.

    """

    status_code: int
    errors: Any
    request_id: str | None

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: Any = None,
        request_id: str | None = None,
    ):
        """Initialize the exception with message and response status code.

        Args:
            message (str): Error message.
            status_code (int): The HTTP status code returned.
            errors (Any): Structured error payload. Default to None.
            request_id (str | None): Request id reported by the shop. Default to None.

        """
        self.status_code = status_code
        self.errors = errors
        self.request_id = request_id
        super().__init__(f"{{message: {message}, status_code: {status_code}}}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        errors = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            errors = body.get("errors", body.get("error"))
        return cls(
            response.text,
            response.status_code,
            errors=errors,
            request_id=response.headers.get(REQUEST_ID_HEADER),
        )


class MalformedResponseError(Exception):
    """Exception raised when a successful response body cannot be decoded or lacks the expected envelope key.

    Attributes:
        root_key (str): The envelope key that was expected.
        body (str): The raw response body.

    """

    root_key: str
    body: str

    def __init__(self, root_key: str, body: str):
        self.root_key = root_key
        self.body = body
        super().__init__(f"Response body has no '{root_key}' property: {body[:200]}")


class AccessTokenNotSpecifiedError(Exception):
    """Exception raised when the shop is accessed without defining `access_token` in the client config."""

    def __init__(self):
        """Initialize the exception with a default message."""
        super().__init__("Access token is not specified")
