from __future__ import annotations

import threading
from typing import Any, Mapping, Optional, Union

from .client_base import BaseAPIClient
from .responses import (
    decode_response,
    interpret_create,
    interpret_delete,
    interpret_update,
    interpret_update_count,
)
from .schema import NewProduct, Product, SearchResponse, as_payload
from .stream import ItemStream, stream_search
from .trampoline import ItemCallback, iterate, search_page


class ProductsAPI(BaseAPIClient):
    """Product catalog endpoints."""

    def products_search(
        self, filter: Optional[Mapping[str, str]] = None
    ) -> SearchResponse[Product]:
        """
        Search or filter products in the store catalog (one page).

        Common filter keys: keyword, priceFrom, priceTo, category,
        withSubcategories, sortBy, offset, limit, createdFrom, createdTo,
        updatedFrom, updatedTo, enabled, inStock, onsale, sku, productId,
        baseUrl, cleanUrls.
        """
        return search_page(self, "/products", Product, filter)

    def products_trampoline(
        self, filter: Optional[Mapping[str, str]], fn: ItemCallback[Product]
    ) -> int:
        """Call ``fn(index, product)`` on every product matching ``filter``."""
        return iterate(filter, self.products_search, fn)

    def products(
        self,
        filter: Optional[Mapping[str, str]] = None,
        cancel: Optional[threading.Event] = None,
    ) -> ItemStream[Product]:
        """Lazily iterate over every product matching ``filter``."""
        return stream_search(filter, self.products_search, cancel)

    def product_get(self, product_id: int) -> Product:
        response = self.get(
            "/products/{product_id}", path_params={"product_id": product_id}
        )
        return decode_response(response, Product)

    def product_add(self, product: Union[NewProduct, Mapping[str, Any]]) -> int:
        """Create a product and return its id."""
        response = self.post("/products", json_body=as_payload(product))
        return interpret_create(response)

    def product_update(
        self, product_id: int, product: Union[NewProduct, Mapping[str, Any]]
    ) -> None:
        response = self.put(
            "/products/{product_id}",
            path_params={"product_id": product_id},
            json_body=as_payload(product),
        )
        interpret_update(response)

    def product_delete(self, product_id: int) -> None:
        response = self.delete(
            "/products/{product_id}", path_params={"product_id": product_id}
        )
        interpret_delete(response)

    def product_inventory_adjust(self, product_id: int, quantity_delta: int) -> int:
        """
        Increase or decrease the stock quantity by ``quantity_delta``.
        Returns the update count reported by the API.
        """
        response = self.put(
            "/products/{product_id}/inventory",
            path_params={"product_id": product_id},
            json_body={"quantityDelta": quantity_delta},
        )
        return interpret_update_count(response)
