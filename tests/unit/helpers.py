# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import json
from typing import Any, Callable

import httpx

from shopify_sdk.clients.rest import ShopifyClient, ShopifyClientConfig

SHOP_URL = "test-shop.myshopify.com"
ACCESS_TOKEN = "shpat_test_token"
API_VERSION = "2024-10"
BASE_PATH = f"/admin/api/{API_VERSION}/"


class RecordingHandler:
    """Mock transport handler answering every request with a fixed response and keeping the requests it received."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
        text: str | None = None,
    ):
        self.status_code = status_code
        self.json_body = json_body
        self.headers = headers or {}
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text, headers=self.headers)
        return httpx.Response(
            self.status_code, json=self.json_body, headers=self.headers
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_path(self) -> str:
        return self.last_request.url.path[len(BASE_PATH) :]

    def last_params(self) -> dict[str, str]:
        return dict(self.last_request.url.params)

    def last_body(self) -> Any:
        return json.loads(self.last_request.content)


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> ShopifyClient:
    config = ShopifyClientConfig(
        shop_url=SHOP_URL,
        access_token=ACCESS_TOKEN,
        api_version=API_VERSION,
        transport=httpx.MockTransport(handler),
    )
    return ShopifyClient(shopify_client_config=config)
