from __future__ import annotations

from typing import Any, List, Mapping, Union

from .client_base import BaseAPIClient
from .responses import decode_response, interpret_update
from .schema import NewProductVariation, ProductVariation, as_payload


class VariationsAPI(BaseAPIClient):
    """Product variations (combinations)."""

    def product_variations_get(self, product_id: int) -> List[ProductVariation]:
        response = self.get(
            "/products/{product_id}/combinations",
            path_params={"product_id": product_id},
        )
        return decode_response(response, List[ProductVariation])

    def product_variation_get(
        self, product_id: int, variation_id: int
    ) -> ProductVariation:
        response = self.get(
            "/products/{product_id}/combinations/{variation_id}",
            path_params={"product_id": product_id, "variation_id": variation_id},
        )
        return decode_response(response, ProductVariation)

    def product_variation_update(
        self,
        product_id: int,
        variation_id: int,
        variation: Union[NewProductVariation, Mapping[str, Any]],
    ) -> None:
        response = self.put(
            "/products/{product_id}/combinations/{variation_id}",
            path_params={"product_id": product_id, "variation_id": variation_id},
            json_body=as_payload(variation),
        )
        interpret_update(response)
