from __future__ import annotations

from typing import Any, List, Mapping, Union

from .client_base import BaseAPIClient
from .responses import decode_response, interpret_create, interpret_delete, interpret_update
from .schema import ProductType, as_payload


class ProductTypesAPI(BaseAPIClient):
    """
    Product types (product classes): groups of products sharing the
    same attributes.
    """

    def product_types_get(self) -> List[ProductType]:
        return decode_response(self.get("/classes"), List[ProductType])

    def product_type_get(self, product_class_id: int) -> ProductType:
        response = self.get(
            "/classes/{class_id}", path_params={"class_id": product_class_id}
        )
        return decode_response(response, ProductType)

    def product_type_add(
        self, product_type: Union[ProductType, Mapping[str, Any]]
    ) -> int:
        response = self.post("/classes", json_body=as_payload(product_type))
        return interpret_create(response)

    def product_type_update(
        self,
        product_class_id: int,
        product_type: Union[ProductType, Mapping[str, Any]],
    ) -> None:
        """
        Existing attributes are referred to by id. Attributes left out of
        the request are removed from the type, so send them all.
        """
        response = self.put(
            "/classes/{class_id}",
            path_params={"class_id": product_class_id},
            json_body=as_payload(product_type),
        )
        interpret_update(response)

    def product_type_delete(self, product_class_id: int) -> None:
        """Products of the deleted type are moved to the General type."""
        response = self.delete(
            "/classes/{class_id}", path_params={"class_id": product_class_id}
        )
        interpret_delete(response)
