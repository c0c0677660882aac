import json
from decimal import Decimal

import pytest

from storefront.schemas.product import Product
from storefront.services.catalog import Catalog, is_numeric_id, parse_product_id


def test_find_by_id(catalog):
    product = catalog.find_by_id(1)

    assert product.name == "iPhone 15 Pro"
    assert product.price == Decimal("999.99")
    assert product.stock == 50


def test_find_by_id_accepts_numeric_string(catalog):
    assert catalog.find_by_id("3").name == "MacBook Pro M3"


@pytest.mark.parametrize("value", [999, "999", "abc", "", "0", 0, -1, "-1", "1.5", None, True])
def test_find_by_id_returns_none_for_unknown_or_malformed(catalog, value):
    assert catalog.find_by_id(value) is None


def test_parse_product_id():
    assert parse_product_id("42") == 42
    assert parse_product_id(7) == 7
    assert parse_product_id("4 2") is None
    assert parse_product_id("٣") is None
    assert parse_product_id(False) is None


def test_is_numeric_id():
    assert is_numeric_id("42")
    assert is_numeric_id("0")
    assert is_numeric_id("-1")
    assert not is_numeric_id("abc")
    assert not is_numeric_id("1.5")
    assert not is_numeric_id("")
    assert not is_numeric_id(None)


def test_search_without_query_returns_everything(catalog):
    products, pagination = catalog.search()

    assert len(products) == 5
    assert pagination.total_products == 5
    assert pagination.total_pages == 1
    assert pagination.current_page == 1
    assert pagination.has_next is False
    assert pagination.has_prev is False


def test_search_is_case_insensitive_on_name(catalog):
    products, pagination = catalog.search("IPHONE")

    assert [p.id for p in products] == [1]
    assert pagination.total_products == 1


def test_search_matches_description(catalog):
    products, _ = catalog.search("wireless")

    assert [p.name for p in products] == ["Sony WH-1000XM5"]


def test_search_no_match(catalog):
    products, pagination = catalog.search("toaster")

    assert products == []
    assert pagination.total_pages == 0
    assert pagination.has_next is False


def test_search_pagination(catalog):
    first, first_page = catalog.search(page=1, limit=2)
    second, second_page = catalog.search(page=2, limit=2)
    last, last_page = catalog.search(page=3, limit=2)

    assert [p.id for p in first] == [1, 2]
    assert [p.id for p in second] == [3, 4]
    assert [p.id for p in last] == [5]

    assert first_page.total_pages == 3
    assert first_page.has_next is True and first_page.has_prev is False
    assert second_page.has_next is True and second_page.has_prev is True
    assert last_page.has_next is False and last_page.has_prev is True


def test_search_page_past_the_end(catalog):
    products, pagination = catalog.search(page=10, limit=2)

    assert products == []
    assert pagination.current_page == 10
    assert pagination.has_prev is True


def test_search_zero_page_and_limit_are_not_rejected(catalog):
    products, pagination = catalog.search(page=0, limit=10)
    assert products == []
    assert pagination.total_pages == 1

    products, pagination = catalog.search(page=1, limit=0)
    assert products == []
    assert pagination.total_pages == 0


def test_duplicate_ids_rejected():
    product = Product(id=1, name="A", price=Decimal("1"), image="x", description="", stock=1)

    with pytest.raises(ValueError, match="unique"):
        Catalog([product, product])


def test_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([
        {"id": 7, "name": "Desk Lamp", "price": 19.99, "image": "https://example.com/lamp.jpg",
         "description": "Warm light", "stock": 3}
    ]))

    catalog = Catalog.from_file(str(path))

    assert len(catalog) == 1
    assert catalog.find_by_id(7).price == Decimal("19.99")


def test_from_file_requires_array(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"id": 1}))

    with pytest.raises(ValueError, match="JSON array"):
        Catalog.from_file(str(path))
