"""
Ecwid SDK - REST API Client Module

Typed client for the store REST API (``https://app.ecwid.com/api/v3/{storeId}``).

Usage:
------
    from ecwid_sdk.api_client import EcwidClient, NewProduct

    client = EcwidClient(store_id=1003, token="secret_...")

    # One page
    page = client.products_search({"keyword": "mug", "limit": "10"})

    # Every page, with a callback
    client.products_trampoline({"keyword": "mug"}, lambda i, p: print(i, p.name))

    # Every page, as a lazy cancellable stream
    for product in client.products({"keyword": "mug"}):
        ...

    product_id = client.product_add(NewProduct(name="Mug", price=9.5))

Configuration:
--------------
    EcwidClient.from_env() reads:

    ECWID_STORE_ID      - Store id (required)
    ECWID_TOKEN         - API access token (required)
    ECWID_API_HOST      - Override the API host
    ECWID_TIMEOUT_SEC   - Request timeout (default: 15)
"""

# -----------------------------------------------------------------------------
# Transport and errors
# -----------------------------------------------------------------------------
from .client_base import BaseAPIClient
from .errors import (
    APIClientError,
    APIError,
    DecodeError,
    EcwidConfigError,
    IterationCancelled,
    NoRowsAffected,
    StalledPaginationError,
    TransportError,
)

# -----------------------------------------------------------------------------
# Response handling and pagination
# -----------------------------------------------------------------------------
from .responses import (
    decode_response,
    interpret_create,
    interpret_delete,
    interpret_delete_count,
    interpret_update,
    interpret_update_count,
)
from .trampoline import iterate, search_page
from .stream import ItemStream, stream_search

# -----------------------------------------------------------------------------
# Store client
# -----------------------------------------------------------------------------
from .client import EcwidClient

# -----------------------------------------------------------------------------
# Schema
# -----------------------------------------------------------------------------
from .schema import (
    Attribute,
    Attributes,
    Category,
    NewCategory,
    NewOrder,
    NewProduct,
    NewProductVariation,
    Order,
    Product,
    ProductType,
    ProductVariation,
    SearchResponse,
    StoreProfile,
)


__all__ = [
    # Transport and errors
    "BaseAPIClient",
    "APIClientError",
    "APIError",
    "DecodeError",
    "EcwidConfigError",
    "IterationCancelled",
    "NoRowsAffected",
    "StalledPaginationError",
    "TransportError",
    # Response handling and pagination
    "decode_response",
    "interpret_create",
    "interpret_delete",
    "interpret_delete_count",
    "interpret_update",
    "interpret_update_count",
    "iterate",
    "search_page",
    "ItemStream",
    "stream_search",
    # Client
    "EcwidClient",
    # Schema
    "Attribute",
    "Attributes",
    "Category",
    "NewCategory",
    "NewOrder",
    "NewProduct",
    "NewProductVariation",
    "Order",
    "Product",
    "ProductType",
    "ProductVariation",
    "SearchResponse",
    "StoreProfile",
]
