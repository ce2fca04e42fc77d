import pytest

from taskboard.pagination import (
    OFFLINE_PAGE_SIZE,
    clamp_page,
    clean_keywords,
    take_page,
    total_pages,
)


def test_empty_list_has_one_page():
    assert total_pages(0, OFFLINE_PAGE_SIZE) == 1


@pytest.mark.parametrize("total", [1, 5, 19, 20, 21, 39, 40, 41, 100])
@pytest.mark.parametrize("page_size", [1, 3, 20])
def test_total_pages_covers_items_exactly(total, page_size):
    pages = total_pages(total, page_size)
    assert pages * page_size >= total
    assert (pages - 1) * page_size < total


def test_exact_multiple_has_no_extra_page():
    assert total_pages(2 * OFFLINE_PAGE_SIZE, OFFLINE_PAGE_SIZE) == 2


@pytest.mark.parametrize("page", [-5, 0, 1, 2, 3, 50])
def test_clamp_page_stays_in_range(page):
    result = clamp_page(page, 45, 20)
    assert 1 <= result <= total_pages(45, 20)
    if 1 <= page <= total_pages(45, 20):
        assert result == page


def test_clamp_page_on_empty_list_is_first_page():
    assert clamp_page(7, 0, OFFLINE_PAGE_SIZE) == 1


def test_clamp_page_above_end_goes_to_last_page():
    assert clamp_page(99, 45, 20) == total_pages(45, 20)


@pytest.mark.parametrize("count", [0, 1, 7, 20, 21, 55])
@pytest.mark.parametrize("page_size", [1, 4, 20])
def test_pages_concatenate_back_to_items(count, page_size):
    items = list(range(count))
    pages = [take_page(items, p, page_size) for p in range(1, total_pages(count, page_size) + 1)]
    assert [x for page in pages for x in page] == items
    assert all(len(page) <= page_size for page in pages)


def test_take_page_past_end_is_empty():
    items = list(range(10))
    assert take_page(items, total_pages(10, 4) + 1, 4) == []


def test_take_page_of_empty_list_is_empty():
    assert take_page([], 1, OFFLINE_PAGE_SIZE) == []


def test_take_page_zero_is_treated_as_first():
    items = ["a", "b", "c"]
    assert take_page(items, 0, 2) == take_page(items, 1, 2)


def test_take_page_returns_first_slice():
    items = ["a", "b", "c", "d"]
    assert take_page(items, 2, 3) == ["d"]


@pytest.mark.parametrize("func", [total_pages, lambda t, s: clamp_page(1, t, s)])
def test_zero_page_size_is_rejected(func):
    with pytest.raises(ValueError):
        func(10, 0)


def test_take_page_rejects_zero_page_size():
    with pytest.raises(ValueError):
        take_page([1, 2], 1, 0)


def test_clean_keywords_drops_blank_entries():
    assert clean_keywords(["work", "", "   ", "home", "work"]) == {"work", "home"}


def test_clean_keywords_keeps_entries_as_given():
    assert clean_keywords([" padded ", "\t"]) == {" padded "}


def test_clean_keywords_of_nothing_is_empty():
    assert clean_keywords([]) == set()