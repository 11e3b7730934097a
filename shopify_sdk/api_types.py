# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping

DEFAULT_API_VERSION = "2024-10"

# Header names
ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"
REQUEST_ID_HEADER = "X-Request-Id"

# Envelope keys
COUNT_KEY = "count"

# Events scoped to a subject, e.g. `orders/450789469/events`
SUBJECT_EVENTS_PATH = "{subject_type}/{subject_id}/events"


@dataclass(frozen=True)
class Resource:
    """Declarative description of a REST resource.

    Attributes:
        singular: Envelope key of a single record, e.g. 'image'.
        plural: Envelope key of a list of records, e.g. 'images'.
        collection_path: Path of the collection without the `.json` suffix. May contain a `{parent_id}` placeholder
            for resources nested under a parent, e.g. 'products/{parent_id}/images'.

    """

    singular: str
    plural: str
    collection_path: str

    @property
    def is_nested(self) -> bool:
        return "{parent_id}" in self.collection_path

    def collection(self, parent_id: int | str | None = None) -> str:
        if self.is_nested:
            if parent_id is None:
                raise ValueError(
                    f"Resource '{self.plural}' requires a parent id to build its path"
                )
            return self.collection_path.format(parent_id=parent_id)
        return self.collection_path

    def collection_endpoint(self, parent_id: int | str | None = None) -> str:
        return f"{self.collection(parent_id)}.json"

    def count_endpoint(self, parent_id: int | str | None = None) -> str:
        return f"{self.collection(parent_id)}/count.json"

    def item_endpoint(
        self, resource_id: int | str, parent_id: int | str | None = None
    ) -> str:
        return f"{self.collection(parent_id)}/{resource_id}.json"


EVENT_RESOURCE = Resource(singular="event", plural="events", collection_path="events")
PRODUCT_IMAGE_RESOURCE = Resource(
    singular="image",
    plural="images",
    collection_path="products/{parent_id}/images",
)


def pluralize_subject_type(subject_type: str) -> str:
    """Normalizes an event subject type into the plural, lower-cased path segment used by the API.

    An 's' is appended unless the value already ends with one (case-insensitive), then the whole value is lower-cased.
    Irregular plurals are not handled, e.g. 'Category' becomes 'categorys'; callers pass those already pluralized.

    Args:
        subject_type (str): Subject type such as 'Order', 'Product' or 'Blogs'.

    Returns:
        str: Path segment such as 'orders', 'products' or 'blogs'.

    """
    if not subject_type:
        raise ValueError("Subject type must not be empty")
    if subject_type[-1:].lower() != "s":
        subject_type = subject_type + "s"
    return subject_type.lower()


def format_param(value: Any) -> Any:
    """Renders a filter value the way the Admin API expects it in a query string."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, tuple, set)):
        return ",".join(str(format_param(item)) for item in value)
    return value


def _compact(params: Mapping[str, Any]) -> dict[str, Any]:
    return {key: format_param(val) for key, val in params.items() if val is not None}


@dataclass(frozen=True)
class CountFilter:
    """Generic count filter.

    Attributes:
        query: Query parameters passed through to the count endpoint. Keys are not validated.

    """

    query: Mapping[str, Any] = field(default_factory=dict)

    def to_params(self) -> dict[str, Any]:
        return _compact(self.query)


@dataclass(frozen=True)
class ListFilter:
    """Generic list filter, the shape every specialized list filter converts into.

    Attributes:
        limit: Maximum number of records per page, the API caps it at 250.
        page_info: Cursor of the page to fetch, taken from a previous `ListResult`.
        fields: Comma separated allow-list of fields to return.
        query: Any further query parameters. Keys are not validated.

    """

    limit: int | None = None
    page_info: str | None = None
    fields: str | None = None
    query: Mapping[str, Any] = field(default_factory=dict)

    def to_params(self) -> dict[str, Any]:
        """Converts the filter to a dictionary of query parameters.

        Returns:
            dict[str, Any]: Dictionary of parameters for HTTP request.

        """
        params = _compact(self.query)
        params.update(
            _compact(
                {"limit": self.limit, "page_info": self.page_info, "fields": self.fields}
            )
        )
        return params


@dataclass(frozen=True)
class EventListFilter:
    """Options for listing events.

    Attributes:
        limit: Maximum number of events per page.
        since_id: Restrict results to events after the given id.
        created_at_min: Only events created at or after this date.
        created_at_max: Only events created at or before this date.
        filter: Subject types to restrict results to, e.g. ['Product', 'Order'].
        verb: Restrict results to a certain event verb, e.g. 'create'.
        fields: Comma separated allow-list of fields to return.

    """

    limit: int | None = None
    since_id: int | None = None
    created_at_min: datetime | str | None = None
    created_at_max: datetime | str | None = None
    filter: list[str] | str | None = None
    verb: str | None = None
    fields: str | None = None

    def as_list_filter(self) -> ListFilter:
        return ListFilter(
            limit=self.limit,
            fields=self.fields,
            query=_compact(
                {
                    "since_id": self.since_id,
                    "created_at_min": self.created_at_min,
                    "created_at_max": self.created_at_max,
                    "filter": self.filter,
                    "verb": self.verb,
                }
            ),
        )

    def to_params(self) -> dict[str, Any]:
        return self.as_list_filter().to_params()


@dataclass(frozen=True)
class EventCountFilter:
    """Options for counting events.

    Attributes:
        created_at_min: Count events created at or after this date.
        created_at_max: Count events created at or before this date.

    """

    created_at_min: datetime | str | None = None
    created_at_max: datetime | str | None = None

    def as_count_filter(self) -> CountFilter:
        return CountFilter(
            query=_compact(
                {
                    "created_at_min": self.created_at_min,
                    "created_at_max": self.created_at_max,
                }
            )
        )

    def to_params(self) -> dict[str, Any]:
        return self.as_count_filter().to_params()


@dataclass(frozen=True)
class ProductImageListFilter:
    """Options for listing the images of a product.

    Attributes:
        since_id: Restrict results to images after the given id.
        fields: Comma separated allow-list of fields to return.

    """

    since_id: int | None = None
    fields: str | None = None

    def as_list_filter(self) -> ListFilter:
        return ListFilter(fields=self.fields, query=_compact({"since_id": self.since_id}))

    def to_params(self) -> dict[str, Any]:
        return self.as_list_filter().to_params()


@dataclass(frozen=True)
class ProductImageCountFilter:
    """Options for counting the images of a product.

    Attributes:
        since_id: Count images after the given id.

    """

    since_id: int | None = None

    def as_count_filter(self) -> CountFilter:
        return CountFilter(query=_compact({"since_id": self.since_id}))

    def to_params(self) -> dict[str, Any]:
        return self.as_count_filter().to_params()


def filter_to_params(filter: Any) -> dict[str, Any]:
    """Converts any accepted filter shape (filter object, plain mapping or None) into query parameters."""
    if filter is None:
        return {}
    if isinstance(filter, Mapping):
        return _compact(filter)
    return filter.to_params()


@dataclass(frozen=True)
class ListResult:
    """One page of records returned by a list endpoint.

    Attributes:
        items: Records of the page, in the order returned by the API.
        link_header: Raw `Link` response header, if any.
        next_page_info: Cursor of the next page, None on the last page.
        previous_page_info: Cursor of the previous page, None on the first page.

    """

    items: list[dict[str, Any]]
    link_header: str | None = None
    next_page_info: str | None = None
    previous_page_info: str | None = None

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def has_next_page(self) -> bool:
        return self.next_page_info is not None

    @property
    def has_previous_page(self) -> bool:
        return self.previous_page_info is not None

    def next_page_filter(
        self, limit: int | None = None, fields: str | None = None
    ) -> ListFilter | None:
        """Builds the filter that fetches the next page, or None when this is the last page.

        The API rejects other filter parameters alongside a cursor, so only `limit` and `fields` carry over.
        """
        if self.next_page_info is None:
            return None
        return ListFilter(limit=limit, page_info=self.next_page_info, fields=fields)

    def previous_page_filter(
        self, limit: int | None = None, fields: str | None = None
    ) -> ListFilter | None:
        if self.previous_page_info is None:
            return None
        return ListFilter(limit=limit, page_info=self.previous_page_info, fields=fields)
