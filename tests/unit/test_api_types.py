# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import unittest
from datetime import datetime, timezone

from shopify_sdk.api_types import (
    EVENT_RESOURCE,
    PRODUCT_IMAGE_RESOURCE,
    CountFilter,
    EventCountFilter,
    EventListFilter,
    ListFilter,
    ListResult,
    ProductImageCountFilter,
    ProductImageListFilter,
    filter_to_params,
    format_param,
    pluralize_subject_type,
)


class TestPluralizeSubjectType(unittest.TestCase):
    def test_appends_s_and_lowercases(self):
        self.assertEqual(pluralize_subject_type("Product"), "products")
        self.assertEqual(pluralize_subject_type("Order"), "orders")
        self.assertEqual(pluralize_subject_type("Custom_Collection"), "custom_collections")

    def test_keeps_existing_plural(self):
        self.assertEqual(pluralize_subject_type("Blogs"), "blogs")
        self.assertEqual(pluralize_subject_type("ARTICLES"), "articles")
        self.assertEqual(pluralize_subject_type("pageS"), "pages")

    def test_irregular_plurals_are_not_handled(self):
        self.assertEqual(pluralize_subject_type("Category"), "categorys")

    def test_empty_subject_type(self):
        with self.assertRaises(ValueError):
            pluralize_subject_type("")


class TestResource(unittest.TestCase):
    def test_top_level_endpoints(self):
        self.assertEqual(EVENT_RESOURCE.collection_endpoint(), "events.json")
        self.assertEqual(EVENT_RESOURCE.count_endpoint(), "events/count.json")
        self.assertEqual(EVENT_RESOURCE.item_endpoint(42), "events/42.json")
        self.assertFalse(EVENT_RESOURCE.is_nested)

    def test_nested_endpoints(self):
        self.assertTrue(PRODUCT_IMAGE_RESOURCE.is_nested)
        self.assertEqual(
            PRODUCT_IMAGE_RESOURCE.collection_endpoint(7), "products/7/images.json"
        )
        self.assertEqual(
            PRODUCT_IMAGE_RESOURCE.count_endpoint(7), "products/7/images/count.json"
        )
        self.assertEqual(
            PRODUCT_IMAGE_RESOURCE.item_endpoint(9, 7), "products/7/images/9.json"
        )

    def test_nested_endpoint_requires_parent(self):
        with self.assertRaises(ValueError):
            PRODUCT_IMAGE_RESOURCE.collection_endpoint()


class TestFilters(unittest.TestCase):
    def test_format_param(self):
        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        self.assertEqual(format_param(moment), "2024-01-02T03:04:05+00:00")
        self.assertEqual(format_param(True), "true")
        self.assertEqual(format_param(["Product", "Order"]), "Product,Order")
        self.assertEqual(format_param(5), 5)

    def test_empty_filters_have_no_params(self):
        self.assertEqual(ListFilter().to_params(), {})
        self.assertEqual(CountFilter().to_params(), {})
        self.assertEqual(EventListFilter().to_params(), {})
        self.assertEqual(filter_to_params(None), {})

    def test_event_list_filter_matches_generic_filter(self):
        moment = datetime(2024, 1, 2, tzinfo=timezone.utc)
        specialized = EventListFilter(
            limit=50,
            since_id=10,
            created_at_min=moment,
            filter=["Product", "Order"],
            verb="create",
            fields="id,verb",
        )
        generic = ListFilter(
            limit=50,
            fields="id,verb",
            query={
                "since_id": 10,
                "created_at_min": moment,
                "filter": "Product,Order",
                "verb": "create",
            },
        )
        self.assertEqual(specialized.as_list_filter().to_params(), generic.to_params())
        self.assertEqual(
            specialized.to_params(),
            {
                "limit": 50,
                "since_id": 10,
                "created_at_min": "2024-01-02T00:00:00+00:00",
                "filter": "Product,Order",
                "verb": "create",
                "fields": "id,verb",
            },
        )

    def test_count_filters(self):
        self.assertEqual(
            EventCountFilter(created_at_max="2024-02-01").to_params(),
            {"created_at_max": "2024-02-01"},
        )
        self.assertEqual(ProductImageCountFilter(since_id=3).to_params(), {"since_id": 3})
        self.assertEqual(
            ProductImageListFilter(since_id=3, fields="id").to_params(),
            {"since_id": 3, "fields": "id"},
        )

    def test_plain_mapping_drops_none(self):
        self.assertEqual(
            filter_to_params({"verb": "destroy", "since_id": None}), {"verb": "destroy"}
        )


class TestListResult(unittest.TestCase):
    def test_page_filters(self):
        result = ListResult(
            items=[{"id": 1}, {"id": 2}], next_page_info="next", previous_page_info=None
        )
        self.assertEqual(len(result), 2)
        self.assertEqual([item["id"] for item in result], [1, 2])
        self.assertTrue(result.has_next_page)
        self.assertFalse(result.has_previous_page)
        self.assertEqual(
            result.next_page_filter(limit=2).to_params(), {"limit": 2, "page_info": "next"}
        )
        self.assertIsNone(result.previous_page_filter())
