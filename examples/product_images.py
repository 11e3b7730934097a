# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import asyncio
import os

from examples.common import ACCESS_TOKEN, PRODUCT_ID, SHOP_URL
from shopify_sdk.clients.rest import ShopifyClient, ShopifyClientConfig


async def main():
    assert PRODUCT_ID, "SHOPIFY_PRODUCT_ID must be set"
    config = ShopifyClientConfig(access_token=ACCESS_TOKEN)
    async with ShopifyClient(SHOP_URL, config) as shopify_client:
        images = shopify_client.product_images

        image = await images.create(
            PRODUCT_ID, {"src": "https://cdn.shopify.com/static/sample-images/bath.jpeg"}
        )
        print(f"Created image {image['id']}: {image['src']}")

        path = os.path.join(os.path.dirname(__file__), "logo.png")
        if os.path.exists(path):
            uploaded = await images.create_from_file(PRODUCT_ID, path, {"alt": "Logo"})
            print(f"Uploaded image {uploaded['id']}: {uploaded['src']}")

        image = await images.update(PRODUCT_ID, image["id"], {"id": image["id"], "position": 1})
        print(f"Image {image['id']} moved to position {image['position']}")
        print(f"Product has {await images.count(PRODUCT_ID)} images")

        await images.delete(PRODUCT_ID, image["id"])
        print(f"Deleted image {image['id']}")


if __name__ == "__main__":
    asyncio.run(main())
