# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import asyncio

from examples.common import ACCESS_TOKEN, PRODUCT_ID, SHOP_URL
from shopify_sdk.api_types import EventListFilter
from shopify_sdk.clients.rest import ShopifyClient, ShopifyClientConfig


async def main():
    config = ShopifyClientConfig(access_token=ACCESS_TOKEN)
    async with ShopifyClient(SHOP_URL, config) as shopify_client:
        print(f"Total events: {await shopify_client.events.count()}")

        # Walk every page of product events.
        page = await shopify_client.events.list(EventListFilter(limit=50, filter=["Product"]))
        while True:
            for event in page:
                print(f"{event['created_at']} {event['verb']}: {event['message']}")
            next_filter = page.next_page_filter(limit=50)
            if next_filter is None:
                break
            page = await shopify_client.events.list(next_filter)

        if PRODUCT_ID:
            product_events = await shopify_client.events.list(
                subject_id=PRODUCT_ID, subject_type="Product"
            )
            print(f"Events of product {PRODUCT_ID}: {len(product_events)}")


if __name__ == "__main__":
    asyncio.run(main())
