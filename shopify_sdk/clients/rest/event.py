# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from shopify_sdk.api_types import (
    EVENT_RESOURCE,
    SUBJECT_EVENTS_PATH,
    CountFilter,
    EventCountFilter,
    EventListFilter,
    ListFilter,
    ListResult,
    pluralize_subject_type,
)
from shopify_sdk.clients.rest.rest_client import ResourceRestClient


class EventRestClient(ResourceRestClient):
    """A class that provides methods to invoke the read-only `Event` REST endpoints of a shop.

    Attributes:
        api_client (ApiClient): Inherited from `RestClient`. Used to send HTTP requests to the shop.

    """

    resource = EVENT_RESOURCE

    async def count(
        self, filter: EventCountFilter | CountFilter | dict[str, Any] | None = None
    ) -> int:
        """Gets a count of all site events.

        Args:
            filter (EventCountFilter | CountFilter | dict[str, Any] | None): Options for filtering the result.
                Default to None.

        Returns:
            int: Number of events matching the filter.

        """
        if isinstance(filter, EventCountFilter):
            filter = filter.as_count_filter()
        return await self._count(filter)

    async def get(self, event_id: int, fields: str | None = None) -> dict[str, Any]:
        """Retrieves the event with the given id.

        Args:
            event_id (int): The id of the event to retrieve.
            fields (str | None): A comma-separated list of fields to return. Default to None.

        Returns:
            dict[str, Any]: The event.

        """
        return await self._get(event_id, fields=fields)

    async def list(
        self,
        filter: EventListFilter | ListFilter | dict[str, Any] | None = None,
        *,
        subject_id: int | None = None,
        subject_type: str | None = None,
    ) -> ListResult:
        """Returns a page of events, optionally restricted to a single subject.

        Known subject types are 'Articles', 'Blogs', 'Custom_Collections', 'Comments', 'Orders', 'Pages', 'Products'
        and 'Smart_Collections'. Singular forms such as 'Order' are accepted and pluralized.

        Args:
            filter (EventListFilter | ListFilter | dict[str, Any] | None): Options for filtering the result.
                Default to None.
            subject_id (int | None): Restricts results to one subject item, e.g. all changes on a product.
            subject_type (str | None): The subject's type, e.g. 'Order' or 'Product'. Required with `subject_id`.

        Returns:
            ListResult: The events and the cursors of the adjacent pages.

        """
        if isinstance(filter, EventListFilter):
            filter = filter.as_list_filter()

        if subject_id is None and subject_type is None:
            return await self._list(filter)
        if subject_id is None or subject_type is None:
            raise ValueError("subject_id and subject_type must be given together")

        endpoint = SUBJECT_EVENTS_PATH.format(
            subject_type=pluralize_subject_type(subject_type), subject_id=subject_id
        )
        return await self._list(filter, endpoint=f"{endpoint}.json")
