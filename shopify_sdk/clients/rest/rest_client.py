# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from shopify_sdk.api_types import COUNT_KEY, ListResult, Resource, filter_to_params
from shopify_sdk.clients import ApiClient, MalformedResponseError


class RestClient:
    """A base class for building resource-specific REST API clients.

    This class provides a shared interface and a common `api_client` instance for sending REST API requests. Other REST
    client classes can inherit from `RestClient` to reuse this functionality.

    Attributes:
        api_client (ApiClient): The API client instance used to perform HTTP requests against the REST API.

    """

    api_client: ApiClient

    def __init__(self, api_client: ApiClient):
        """Initialize a `RestClient` instance.

        Args:
            api_client (ApiClient): An instance of `ApiClient` responsible for managing HTTP requests.

        """
        self.api_client = api_client


class ResourceRestClient(RestClient):
    """Generic count/get/list/create/update/delete operations over a single `Resource`.

    Subclasses set `resource` and expose public methods with the argument shapes of their resource, delegating to the
    protected operations below. Paths, envelope keys and the nesting under a parent all come from `resource`.

    Attributes:
        resource (Resource): Paths and envelope keys of the resource.

    """

    resource: Resource

    async def _count(self, filter: Any = None, parent_id: int | None = None) -> int:
        endpoint = self.resource.count_endpoint(parent_id)
        count = await self.api_client.execute_and_unwrap(
            "GET", endpoint, COUNT_KEY, params=filter_to_params(filter)
        )
        if isinstance(count, bool):
            raise MalformedResponseError(COUNT_KEY, repr(count))
        try:
            return int(count)
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(COUNT_KEY, repr(count)) from e

    async def _get(
        self,
        resource_id: int,
        fields: str | None = None,
        parent_id: int | None = None,
    ) -> dict[str, Any]:
        endpoint = self.resource.item_endpoint(resource_id, parent_id)
        return await self.api_client.execute_and_unwrap(
            "GET", endpoint, self.resource.singular, params={"fields": fields}
        )

    async def _list(
        self,
        filter: Any = None,
        parent_id: int | None = None,
        endpoint: str | None = None,
    ) -> ListResult:
        endpoint = endpoint or self.resource.collection_endpoint(parent_id)
        return await self.api_client.execute_list_and_unwrap(
            endpoint, self.resource.plural, params=filter_to_params(filter)
        )

    async def _create(
        self, record: dict[str, Any], parent_id: int | None = None
    ) -> dict[str, Any]:
        endpoint = self.resource.collection_endpoint(parent_id)
        return await self.api_client.execute_and_unwrap(
            "POST", endpoint, self.resource.singular, data={self.resource.singular: record}
        )

    async def _update(
        self,
        resource_id: int,
        record: dict[str, Any],
        parent_id: int | None = None,
    ) -> dict[str, Any]:
        endpoint = self.resource.item_endpoint(resource_id, parent_id)
        return await self.api_client.execute_and_unwrap(
            "PUT", endpoint, self.resource.singular, data={self.resource.singular: record}
        )

    async def _delete(self, resource_id: int, parent_id: int | None = None) -> None:
        endpoint = self.resource.item_endpoint(resource_id, parent_id)
        await self.api_client.execute_request("DELETE", endpoint)
