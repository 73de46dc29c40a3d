from __future__ import annotations

import threading
from typing import Any, Mapping, Optional, Union

from .client_base import BaseAPIClient
from .responses import decode_response, interpret_create, interpret_delete, interpret_update
from .schema import Category, NewCategory, SearchResponse, as_payload
from .stream import ItemStream, stream_search
from .trampoline import ItemCallback, iterate, search_page


class CategoriesAPI(BaseAPIClient):
    """Category endpoints."""

    def categories_search(
        self, filter: Optional[Mapping[str, str]] = None
    ) -> SearchResponse[Category]:
        # filter: parent, hidden_categories, offset, limit, productIds, baseUrl, cleanUrls
        return search_page(self, "/categories", Category, filter)

    def categories_trampoline(
        self, filter: Optional[Mapping[str, str]], fn: ItemCallback[Category]
    ) -> int:
        return iterate(filter, self.categories_search, fn)

    def categories(
        self,
        filter: Optional[Mapping[str, str]] = None,
        cancel: Optional[threading.Event] = None,
    ) -> ItemStream[Category]:
        return stream_search(filter, self.categories_search, cancel)

    def category_get(self, category_id: int) -> Category:
        response = self.get(
            "/categories/{category_id}", path_params={"category_id": category_id}
        )
        return decode_response(response, Category)

    def category_add(self, category: Union[NewCategory, Mapping[str, Any]]) -> int:
        response = self.post("/categories", json_body=as_payload(category))
        return interpret_create(response)

    def category_update(
        self, category_id: int, category: Union[NewCategory, Mapping[str, Any]]
    ) -> None:
        response = self.put(
            "/categories/{category_id}",
            path_params={"category_id": category_id},
            json_body=as_payload(category),
        )
        interpret_update(response)

    def category_delete(self, category_id: int) -> None:
        response = self.delete(
            "/categories/{category_id}", path_params={"category_id": category_id}
        )
        interpret_delete(response)
