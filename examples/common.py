# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import os

SHOP_URL = os.getenv("SHOPIFY_SHOP_URL", "my-shop.myshopify.com")
ACCESS_TOKEN = os.getenv("SHOPIFY_ACCESS_TOKEN", "")
PRODUCT_ID = int(os.getenv("SHOPIFY_PRODUCT_ID", "0"))
