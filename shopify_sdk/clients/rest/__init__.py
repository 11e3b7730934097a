# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

from shopify_sdk.clients.rest.event import EventRestClient
from shopify_sdk.clients.rest.product_image import ProductImageRestClient
from shopify_sdk.clients.rest.shopify_client import ShopifyClient, ShopifyClientConfig

__all__ = [
    "EventRestClient",
    "ProductImageRestClient",
    "ShopifyClient",
    "ShopifyClientConfig",
]
