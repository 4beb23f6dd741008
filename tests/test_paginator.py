"""Tests for the auto-pagination helpers, driven by in-memory pages."""

from pdum.resource import _paginator


class Pages:
    """Page fetcher over a fixed list of pages, recording every query it sees."""

    def __init__(self, *pages):
        self.pages = list(pages)
        self.queries = []

    def __call__(self, query):
        self.queries.append(dict(query))
        index = int(query.get("pageToken", 0))
        items = self.pages[index]
        next_query = None
        if index + 1 < len(self.pages):
            next_query = {**query, "pageToken": str(index + 1)}
        return items, next_query, {"page": index}


def test_strip_controls():
    query = {"autoPaginate": False, "maxApiCalls": 1, "maxResults": 2, "filter": "x", "pageSize": 3}

    assert _paginator.strip_controls(query) == {"filter": "x", "pageSize": 3}
    assert _paginator.strip_controls(None) == {}


def test_auto_paginate_defaults_to_true():
    assert _paginator.auto_paginate(None)
    assert _paginator.auto_paginate({})
    assert _paginator.auto_paginate({"autoPaginate": True})
    assert not _paginator.auto_paginate({"autoPaginate": False})


def test_iter_pages_follows_continuations():
    fetch = Pages([1, 2], [3], [4, 5])

    pages = list(_paginator.iter_pages(fetch, {"filter": "x"}))

    assert [items for items, _, _ in pages] == [[1, 2], [3], [4, 5]]
    assert pages[-1][1] is None
    assert [q.get("pageToken") for q in fetch.queries] == [None, "1", "2"]
    assert all(q["filter"] == "x" for q in fetch.queries)


def test_iter_pages_stops_at_max_api_calls():
    fetch = Pages([1], [2], [3])

    pages = list(_paginator.iter_pages(fetch, {"maxApiCalls": 2}))

    assert len(pages) == 2
    assert len(fetch.queries) == 2


def test_iter_items_is_lazy():
    fetch = Pages([1, 2], [3])

    items = _paginator.iter_items(fetch)
    assert fetch.queries == []

    assert next(items) == 1
    assert next(items) == 2
    assert len(fetch.queries) == 1
    assert next(items) == 3
    assert len(fetch.queries) == 2


def test_iter_items_stops_at_max_results():
    fetch = Pages([1, 2], [3, 4])

    assert list(_paginator.iter_items(fetch, {"maxResults": 2})) == [1, 2]
    assert len(fetch.queries) == 1


def test_iter_items_zero_max_results_fetches_nothing():
    fetch = Pages([1])

    assert list(_paginator.iter_items(fetch, {"maxResults": 0})) == []
    assert fetch.queries == []


def test_collect_accumulates_all_pages():
    fetch = Pages([1, 2], [3], [4])

    items, next_query, api_response = _paginator.collect(fetch)

    assert items == [1, 2, 3, 4]
    assert next_query is None
    assert api_response == {"page": 2}


def test_collect_truncated_page_has_no_continuation():
    fetch = Pages([1, 2], [3, 4], [5])

    items, next_query, _ = _paginator.collect(fetch, {"maxResults": 3})

    assert items == [1, 2, 3]
    assert next_query is None
    assert len(fetch.queries) == 2


def test_collect_keeps_continuation_on_page_boundary():
    fetch = Pages([1, 2], [3, 4], [5])

    items, next_query, _ = _paginator.collect(fetch, {"maxResults": 4})

    assert items == [1, 2, 3, 4]
    assert next_query["pageToken"] == "2"


def test_collect_zero_max_results_fetches_nothing():
    fetch = Pages([1])

    assert _paginator.collect(fetch, {"maxResults": 0}) == ([], None, None)
    assert fetch.queries == []


def test_collect_ignores_invalid_ceilings():
    fetch = Pages([1], [2])

    items, _, _ = _paginator.collect(fetch, {"maxResults": -1, "maxApiCalls": True})

    assert items == [1, 2]


def test_collect_does_not_mutate_query():
    fetch = Pages([1], [2])
    query = {"filter": "x"}

    _paginator.collect(fetch, query)

    assert query == {"filter": "x"}
