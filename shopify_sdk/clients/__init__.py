# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

from shopify_sdk.clients.api_client import (
    AccessTokenNotSpecifiedError,
    ApiClient,
    ApiClientConfig,
    ApiError,
    MalformedResponseError,
)

__all__ = [
    "AccessTokenNotSpecifiedError",
    "ApiClient",
    "ApiClientConfig",
    "ApiError",
    "MalformedResponseError",
]
