from __future__ import annotations

from .client_base import BaseAPIClient
from .responses import decode_response
from .schema import StoreProfile


class StoreAPI(BaseAPIClient):
    def store_profile_get(self) -> StoreProfile:
        """Basic store information: general info and owner account."""
        return decode_response(self.get("/profile"), StoreProfile)
