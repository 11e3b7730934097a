# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import base64
import os
from typing import Any

import aiofiles

from shopify_sdk.api_types import (
    PRODUCT_IMAGE_RESOURCE,
    CountFilter,
    ListFilter,
    ListResult,
    ProductImageCountFilter,
    ProductImageListFilter,
)
from shopify_sdk.clients.rest.rest_client import ResourceRestClient


class ProductImageRestClient(ResourceRestClient):
    """A class that provides methods to manipulate the images of a shop's products.

    Every image belongs to a product, so all methods take the id of that product first.

    Attributes:
        api_client (ApiClient): Inherited from `RestClient`. Used to send HTTP requests to the shop.

    """

    resource = PRODUCT_IMAGE_RESOURCE

    async def count(
        self,
        product_id: int,
        filter: ProductImageCountFilter | CountFilter | dict[str, Any] | None = None,
    ) -> int:
        """Gets a count of the images of a product.

        Args:
            product_id (int): The id of the product the counted images belong to.
            filter (ProductImageCountFilter | CountFilter | dict[str, Any] | None): Options for filtering the result.
                Default to None.

        Returns:
            int: Number of images.

        """
        if isinstance(filter, ProductImageCountFilter):
            filter = filter.as_count_filter()
        return await self._count(filter, parent_id=product_id)

    async def list(
        self,
        product_id: int,
        filter: ProductImageListFilter | ListFilter | dict[str, Any] | None = None,
    ) -> ListResult:
        """Gets the images of a product.

        Args:
            product_id (int): The id of the product the images belong to.
            filter (ProductImageListFilter | ListFilter | dict[str, Any] | None): Options for filtering the result.
                Default to None.

        Returns:
            ListResult: The images and the cursors of the adjacent pages.

        """
        if isinstance(filter, ProductImageListFilter):
            filter = filter.as_list_filter()
        return await self._list(filter, parent_id=product_id)

    async def get(
        self, product_id: int, image_id: int, fields: str | None = None
    ) -> dict[str, Any]:
        """Retrieves the image with the given id.

        Args:
            product_id (int): The id of the product the image belongs to.
            image_id (int): The id of the image to retrieve.
            fields (str | None): A comma-separated list of fields to return. Default to None.

        Returns:
            dict[str, Any]: The image.

        """
        return await self._get(image_id, fields=fields, parent_id=product_id)

    async def create(self, product_id: int, image: dict[str, Any]) -> dict[str, Any]:
        """Creates a new image. An `attachment` (base64 encoded image data) is converted by the shop into `src`.

        Args:
            product_id (int): The id of the product the image belongs to.
            image (dict[str, Any]): The new image, either with a `src` URL or an `attachment`.

        Returns:
            dict[str, Any]: The created image, including the id assigned by the shop.

        """
        return await self._create(image, parent_id=product_id)

    async def create_from_file(
        self,
        product_id: int,
        path: str,
        image: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Uploads a local image file as a new image of the product.

        Args:
            product_id (int): The id of the product the image belongs to.
            path (str): Path of the image file.
            image (dict[str, Any] | None): Further image fields, e.g. `alt` or `position`. Default to None.

        Returns:
            dict[str, Any]: The created image.

        """
        async with aiofiles.open(path, mode="rb") as file:
            content = await file.read()

        image = dict(image or {})
        image["attachment"] = base64.b64encode(content).decode("ascii")
        image.setdefault("filename", os.path.basename(path))
        return await self.create(product_id, image)

    async def update(
        self, product_id: int, image_id: int, image: dict[str, Any]
    ) -> dict[str, Any]:
        """Updates the given image.

        Args:
            product_id (int): The id of the product the image belongs to.
            image_id (int): Id of the image being updated.
            image (dict[str, Any]): The fields to update.

        Returns:
            dict[str, Any]: The updated image.

        """
        return await self._update(image_id, image, parent_id=product_id)

    async def delete(self, product_id: int, image_id: int) -> None:
        """Deletes the image with the given id.

        Args:
            product_id (int): The id of the product the image belongs to.
            image_id (int): The id of the image.

        """
        await self._delete(image_id, parent_id=product_id)
