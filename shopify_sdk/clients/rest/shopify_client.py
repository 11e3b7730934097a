# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import os
from dataclasses import dataclass

from shopify_sdk.api_types import DEFAULT_API_VERSION
from shopify_sdk.clients import ApiClient, ApiClientConfig
from shopify_sdk.clients.rest.event import EventRestClient
from shopify_sdk.clients.rest.product_image import ProductImageRestClient


@dataclass
class ShopifyClientConfig(ApiClientConfig):
    """Configuration for the Shopify client.

    This dataclass inherits from `ApiClientConfig` and adds the shop the client talks to, so a single object holds
    everything needed to build a `ShopifyClient`.

    Attributes:
        shop_url (str | None): The shop's domain, e.g. 'my-shop.myshopify.com'. Default to None.

    """

    shop_url: str | None = None

    @classmethod
    def from_env(cls) -> "ShopifyClientConfig":
        """Builds a config from the `SHOPIFY_SHOP_URL`, `SHOPIFY_ACCESS_TOKEN` and `SHOPIFY_API_VERSION` environment
        variables."""
        return cls(
            shop_url=os.getenv("SHOPIFY_SHOP_URL"),
            access_token=os.getenv("SHOPIFY_ACCESS_TOKEN"),
            api_version=os.getenv("SHOPIFY_API_VERSION", DEFAULT_API_VERSION),
        )


class ShopifyClient:
    """Unified client giving access to every supported resource of a shop through one HTTP session.

    Attributes:
        api_client (ApiClient): Shared client used by every resource client to send HTTP requests to the shop.
        events (EventRestClient): Client of the `events` resource.
        product_images (ProductImageRestClient): Client of the product `images` resource.

    """

    api_client: ApiClient
    events: EventRestClient
    product_images: ProductImageRestClient

    def __init__(
        self,
        shop_url: str | None = None,
        shopify_client_config: ShopifyClientConfig | None = None,
    ):
        """Initializes the client.

        Args:
            shop_url (str | None): The shop's domain. Overrides `shopify_client_config.shop_url` when given.
            shopify_client_config (ShopifyClientConfig | None): Configuration options for requests. Default to None.

        Raises:
            ValueError: If no shop url is given.
            AccessTokenNotSpecifiedError: If the config holds no access token.

        """
        shopify_client_config = shopify_client_config or ShopifyClientConfig()
        shop_url = shop_url or shopify_client_config.shop_url
        if not shop_url:
            raise ValueError("A shop url is required")
        shopify_client_config.raise_if_access_token_not_exists()

        api_client_config = ApiClientConfig(
            http2=shopify_client_config.http2,
            access_token=shopify_client_config.access_token,
            api_version=shopify_client_config.api_version,
            timeout=shopify_client_config.timeout,
            transport=shopify_client_config.transport,
        )
        self.api_client = ApiClient(shop_url, api_client_config)
        self.events = EventRestClient(self.api_client)
        self.product_images = ProductImageRestClient(self.api_client)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        """Closes the HTTP client session."""
        await self.api_client.close()
