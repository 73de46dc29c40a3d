from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from .categories import CategoriesAPI
from .errors import EcwidConfigError
from .images import ImagesAPI
from .orders import OrdersAPI
from .product_types import ProductTypesAPI
from .products import ProductsAPI
from .store import StoreAPI
from .variations import VariationsAPI


logger = logging.getLogger(__name__)


class EcwidClient(
    ProductsAPI,
    CategoriesAPI,
    OrdersAPI,
    ProductTypesAPI,
    VariationsAPI,
    ImagesAPI,
    StoreAPI,
):
    """
    Client for one store.

    The access token travels as the ``token`` query parameter of every
    request. It is fixed for the lifetime of the client; clients for
    other stores or tokens do not share any state with this one.
    """

    DEFAULT_HOST = "app.ecwid.com"
    ENDPOINT = "https://{host}/api/v3/{store_id}"

    def __init__(
        self,
        store_id: int,
        token: str,
        host: Optional[str] = None,
        timeout: Optional[float] = None,
        default_headers: Optional[Dict[str, str]] = None,
    ) -> None:
        if not token:
            raise EcwidConfigError("An API token is required.")

        self.store_id = store_id
        self.host = host or self.DEFAULT_HOST

        super().__init__(
            base_url=self.ENDPOINT.format(host=self.host, store_id=store_id),
            # Never log the token; just attach it to the session.
            default_params={"token": token},
            default_headers=default_headers,
            timeout=timeout,
        )
        logger.info(f"EcwidClient initialized for store {store_id}.")

    @classmethod
    def from_env(cls) -> "EcwidClient":
        """
        Build a client from the environment:

            ECWID_STORE_ID     - store id (required)
            ECWID_TOKEN        - API access token (required)
            ECWID_API_HOST     - API host (default: app.ecwid.com)
            ECWID_TIMEOUT_SEC  - request timeout (default: 15)
        """
        store_id_raw = (os.getenv("ECWID_STORE_ID") or "").strip()
        if not store_id_raw:
            raise EcwidConfigError("ECWID_STORE_ID must be set.")
        try:
            store_id = int(store_id_raw)
        except ValueError as e:
            raise EcwidConfigError(
                f"ECWID_STORE_ID must be an integer, got '{store_id_raw}'."
            ) from e

        token = os.getenv("ECWID_TOKEN") or ""
        if not token:
            raise EcwidConfigError("ECWID_TOKEN must be set.")

        timeout_raw = os.getenv("ECWID_TIMEOUT_SEC", str(cls.DEFAULT_TIMEOUT)).strip()
        try:
            timeout_sec = float(timeout_raw)
        except ValueError as e:
            raise EcwidConfigError(
                f"ECWID_TIMEOUT_SEC must be a number, got '{timeout_raw}'."
            ) from e

        return cls(
            store_id=store_id,
            token=token,
            host=os.getenv("ECWID_API_HOST") or None,
            timeout=timeout_sec,
        )
