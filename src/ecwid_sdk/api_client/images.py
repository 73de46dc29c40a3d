from __future__ import annotations

from typing import BinaryIO, Dict, Union

from .client_base import BaseAPIClient
from .responses import interpret_create, interpret_delete, interpret_delete_count


ImageBody = Union[bytes, BinaryIO]

IMAGE_CONTENT_TYPE = "image/jpeg"


class ImagesAPI(BaseAPIClient):
    """Main product image and product gallery."""

    # ---------------------------------------------------
    # Main image
    # ---------------------------------------------------
    def product_image_upload(self, product_id: int, image: ImageBody) -> int:
        """Upload the main image from bytes or a binary stream. Returns the image id."""
        response = self.post(
            "/products/{product_id}/image",
            path_params={"product_id": product_id},
            headers={"Content-Type": IMAGE_CONTENT_TYPE},
            body=image,
        )
        return interpret_create(response)

    def product_image_upload_file(self, product_id: int, filename: str) -> int:
        with open(filename, "rb") as f:
            return self.product_image_upload(product_id, f)

    def product_image_upload_by_url(self, product_id: int, image_url: str) -> int:
        """Let the API download the main image from ``image_url``."""
        response = self.post(
            "/products/{product_id}/image",
            path_params={"product_id": product_id},
            params={"externalUrl": image_url},
        )
        return interpret_create(response)

    def product_image_delete(self, product_id: int) -> None:
        response = self.delete(
            "/products/{product_id}/image", path_params={"product_id": product_id}
        )
        interpret_delete(response)

    # ---------------------------------------------------
    # Gallery
    # ---------------------------------------------------
    def product_gallery_upload(
        self, product_id: int, image: ImageBody, image_title: str = ""
    ) -> int:
        params: Dict[str, str] = {}
        if image_title:
            params["fileName"] = image_title

        response = self.post(
            "/products/{product_id}/gallery",
            path_params={"product_id": product_id},
            params=params,
            headers={"Content-Type": IMAGE_CONTENT_TYPE},
            body=image,
        )
        return interpret_create(response)

    def product_gallery_upload_file(
        self, product_id: int, filename: str, image_title: str = ""
    ) -> int:
        with open(filename, "rb") as f:
            return self.product_gallery_upload(product_id, f, image_title)

    def product_gallery_upload_by_url(
        self, product_id: int, image_url: str, image_title: str = ""
    ) -> int:
        params = {"externalUrl": image_url}
        if image_title:
            params["fileName"] = image_title

        response = self.post(
            "/products/{product_id}/gallery",
            path_params={"product_id": product_id},
            params=params,
        )
        return interpret_create(response)

    def product_gallery_delete(self, product_id: int, image_id: int) -> None:
        response = self.delete(
            "/products/{product_id}/gallery/{image_id}",
            path_params={"product_id": product_id, "image_id": image_id},
        )
        interpret_delete(response)

    def product_gallery_delete_all(self, product_id: int) -> int:
        """Delete every gallery image. Returns how many were deleted."""
        response = self.delete(
            "/products/{product_id}/gallery", path_params={"product_id": product_id}
        )
        return interpret_delete_count(response)
