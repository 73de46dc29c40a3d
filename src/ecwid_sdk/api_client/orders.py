from __future__ import annotations

import threading
from typing import Any, Mapping, Optional, Union

from .client_base import BaseAPIClient
from .responses import decode_response, interpret_update
from .schema import NewOrder, Order, SearchResponse, as_payload
from .stream import ItemStream, stream_search
from .trampoline import ItemCallback, iterate, search_page


class OrdersAPI(BaseAPIClient):
    """Order endpoints."""

    def orders_search(
        self, filter: Optional[Mapping[str, str]] = None
    ) -> SearchResponse[Order]:
        """
        Search or filter orders (one page).

        Filter keys: keywords, totalFrom, totalTo, createdFrom, createdTo,
        updatedFrom, updatedTo, couponCode, orderId, vendorOrderId, email,
        customerId, paymentMethod, shippingMethod, paymentStatus,
        fulfillmentStatus, acceptMarketing, refererId, productId, offset, limit.
        """
        return search_page(self, "/orders", Order, filter)

    def orders_trampoline(
        self, filter: Optional[Mapping[str, str]], fn: ItemCallback[Order]
    ) -> int:
        return iterate(filter, self.orders_search, fn)

    def orders(
        self,
        filter: Optional[Mapping[str, str]] = None,
        cancel: Optional[threading.Event] = None,
    ) -> ItemStream[Order]:
        return stream_search(filter, self.orders_search, cancel)

    def order_get(self, order_id: int) -> Order:
        response = self.get("/orders/{order_id}", path_params={"order_id": order_id})
        return decode_response(response, Order)

    def order_update(
        self, order_id: int, order: Union[NewOrder, Mapping[str, Any]]
    ) -> None:
        response = self.put(
            "/orders/{order_id}",
            path_params={"order_id": order_id},
            json_body=as_payload(order),
        )
        interpret_update(response)
