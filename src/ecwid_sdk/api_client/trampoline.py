"""
Offset/limit pagination shared by every search endpoint.

``search_page`` issues a single page request, ``iterate`` walks all
pages of a search by moving the ``offset`` filter forward until the
server reports the end of the collection.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Optional, Type, TypeVar

from .client_base import BaseAPIClient
from .errors import StalledPaginationError
from .responses import decode_response
from .schema import SearchResponse


logger = logging.getLogger(__name__)

T = TypeVar("T")

SearchFunc = Callable[[Dict[str, str]], SearchResponse[T]]
ItemCallback = Callable[[int, T], None]


def search_page(
    client: BaseAPIClient,
    path: str,
    item_type: Type[T],
    filter: Optional[Mapping[str, str]] = None,
) -> SearchResponse[T]:
    """
    Fetch one page of ``path`` with ``filter`` as query parameters.
    No pagination and no retry here.
    """
    response = client.get(path, params=filter)
    return decode_response(response, SearchResponse[item_type])


def iterate(
    filter: Optional[Mapping[str, str]],
    search: SearchFunc[T],
    on_item: ItemCallback[T],
) -> int:
    """
    Call ``on_item(index, item)`` for every item of every page.

    Args:
        filter: query parameters of the search. Copied on entry and never
            modified; only the copy gets its ``offset`` advanced.
        search: fetches one page for the given filter
        on_item: called with a running 0-based index over all pages.
            Raising from it aborts the iteration and the exception
            propagates to the caller unchanged.

    Returns:
        Number of items visited.

    Raises:
        Whatever ``search`` or ``on_item`` raise, and StalledPaginationError
        when a page before the end of the collection holds no items.
    """
    local_filter: Dict[str, str] = dict(filter or {})
    index = 0

    while True:
        page = search(local_filter)
        logger.debug(
            f"Page offset={page.offset} count={page.count} total={page.total}"
        )

        for item in page.items:
            on_item(index, item)
            index += 1

        next_offset = page.offset + page.count
        if next_offset >= page.total:
            return index

        if page.count == 0:
            raise StalledPaginationError(
                f"Empty page at offset {page.offset} of {page.total} items"
            )

        local_filter["offset"] = str(next_offset)
