"""Auto-pagination over single-page list methods.

A page-fetch function takes a query dict and returns
``(items, next_query, api_response)``, where ``next_query`` is ``None`` once the
server reports no further pages. The helpers below drive that function
repeatedly, honouring the ``maxApiCalls`` and ``maxResults`` ceilings.
"""

from __future__ import annotations

from typing import Any, Callable, Generator, Optional

# Client-side controls; never serialized into the request.
CONTROL_KEYS: tuple[str, ...] = ("autoPaginate", "maxApiCalls", "maxResults")

PageFetcher = Callable[[dict], tuple[list, Optional[dict], Any]]


def strip_controls(query: Optional[dict]) -> dict:
    """Copy of ``query`` without the pagination control keys."""
    return {k: v for k, v in (query or {}).items() if k not in CONTROL_KEYS}


def auto_paginate(query: Optional[dict]) -> bool:
    return (query or {}).get("autoPaginate", True) is not False


def _ceiling(query: dict, key: str) -> Optional[int]:
    value = query.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def iter_pages(fetch_page: PageFetcher, query: Optional[dict] = None) -> Generator[tuple, None, None]:
    """Yield ``(items, next_query, api_response)`` for each fetched page.

    Stops after the first page without a continuation, or once ``maxApiCalls``
    pages have been fetched.
    """
    query = dict(query or {})
    max_api_calls = _ceiling(query, "maxApiCalls")
    calls = 0
    while query is not None:
        if max_api_calls is not None and calls >= max_api_calls:
            return
        items, query, api_response = fetch_page(query)
        calls += 1
        yield items, query, api_response


def iter_items(fetch_page: PageFetcher, query: Optional[dict] = None) -> Generator[Any, None, None]:
    """Lazily yield items across pages, stopping after ``maxResults`` items.

    Pages are only fetched when the consumer asks for more items, so a
    consumer that stops early triggers no further requests.
    """
    query = dict(query or {})
    max_results = _ceiling(query, "maxResults")
    if max_results == 0:
        return
    count = 0
    for items, _, _ in iter_pages(fetch_page, query):
        for item in items:
            yield item
            count += 1
            if max_results is not None and count >= max_results:
                return


def collect(fetch_page: PageFetcher, query: Optional[dict] = None) -> tuple[list, Optional[dict], Any]:
    """Accumulate every page into one result tuple.

    Returns
    -------
    tuple
        ``(items, next_query, api_response)`` where ``api_response`` is the
        last page's body. ``next_query`` is the continuation of the last
        fetched page when ``maxApiCalls`` stopped the loop on a page boundary;
        it is ``None`` when results are exhausted or when ``maxResults`` cut a
        page short.
    """
    query = dict(query or {})
    max_results = _ceiling(query, "maxResults")
    results: list = []
    next_query: Optional[dict] = None
    api_response: Any = None
    if max_results == 0:
        return results, None, None

    for items, next_query, api_response in iter_pages(fetch_page, query):
        results.extend(items)
        if max_results is not None and len(results) >= max_results:
            if len(results) > max_results:
                del results[max_results:]
                next_query = None
            break
    return results, next_query, api_response


__all__ = ["CONTROL_KEYS", "auto_paginate", "collect", "iter_items", "iter_pages", "strip_controls"]
