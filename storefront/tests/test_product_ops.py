from __future__ import annotations

import pytest

from storefront.data.db.product_ops import (
    filter_products_by_category,
    get_all_products,
    get_categories,
    get_product_detail,
    search_products,
)


@pytest.mark.asyncio
async def test_list_products_ordered_by_id(seeded_db) -> None:
    products = await get_all_products()
    assert [p.id for p in products] == [1, 2, 3, 7]
    assert products[0].to_dict() == {"id": 1, "name": "Blue Widget", "price": 10.0}


@pytest.mark.asyncio
async def test_product_detail_joins_both_tables(seeded_db) -> None:
    detail = await get_product_detail(3)
    assert detail == {
        "id": 3,
        "name": "Garden Hose",
        "price": 15.0,
        "category": "outdoor",
        "description": "Twenty metres of 50% recycled rubber",
        "stock": 3,
    }


@pytest.mark.asyncio
async def test_product_detail_absent_returns_none(seeded_db) -> None:
    assert await get_product_detail(999) is None


@pytest.mark.asyncio
async def test_search_matches_category_only_term(seeded_db) -> None:
    # "outdoor" appears in the category of product 3 and nowhere else
    assert await search_products("outdoor") == [{"id": 3}]


@pytest.mark.asyncio
async def test_search_is_case_insensitive_across_fields(seeded_db) -> None:
    assert await search_products("WIDGET") == [{"id": 1}]
    assert await search_products("blinks") == [{"id": 2}]
    assert await search_products("GE") == [{"id": 1}, {"id": 2}, {"id": 7}]


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(seeded_db) -> None:
    assert await search_products("50%") == [{"id": 3}]
    assert await search_products("_") == []


@pytest.mark.asyncio
async def test_search_without_match_is_empty(seeded_db) -> None:
    assert await search_products("submarine") == []


@pytest.mark.asyncio
async def test_filter_requires_exact_category(seeded_db) -> None:
    assert await filter_products_by_category("tools") == [{"id": 1}]
    assert await filter_products_by_category("tool") == []
    assert await filter_products_by_category("nothing") == []


@pytest.mark.asyncio
async def test_categories_are_distinct_and_sorted(seeded_db) -> None:
    assert await get_categories() == ["electronics", "gear", "outdoor", "tools"]
