# Copyright © Supra
# SPDX-License-Identifier: Apache-2.0

import importlib.metadata as metadata

# constants
PACKAGE_NAME = "shopify-sdk"


class Metadata:
    """Represents the metadata related to the SDK sent to the shop in a header during API call.

    The main objective of this is to let the shop identify the client library that issued the incoming requests.
    """

    SHOPIFY_HEADER = "x-shopify-client"

    @staticmethod
    def get_shopify_header_val():
        version = metadata.version(PACKAGE_NAME)
        return f"shopify-python-sdk/{version}"
