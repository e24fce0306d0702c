from __future__ import annotations

import random

import pytest

from menu_api.core.errors import NotFoundError, ValidationFailedError
from menu_api.domain.menu import (
    build_fields,
    changed_fields,
    coerce_price,
    merge_record,
    next_sequential_id,
    next_timestamp_id,
    parse_item_id,
)
from menu_api.domain.specials import pick_specials


@pytest.mark.parametrize("raw, expected", [("9.5", 9.5), (" 12 ", 12.0), (7, 7), (3.25, 3.25)])
def test_coerce_price_accepts_numbers_and_numeric_strings(raw, expected):
    assert coerce_price(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", None, True, "nan", "inf", [1]])
def test_coerce_price_rejects_non_numeric(raw):
    with pytest.raises(ValidationFailedError):
        coerce_price(raw)


def test_parse_item_id_non_integer_cannot_match():
    assert parse_item_id("42") == 42
    assert parse_item_id(7) == 7
    for raw in ("abc", "1.5", ""):
        with pytest.raises(NotFoundError):
            parse_item_id(raw)


def test_build_fields_ignores_id_and_coerces_price():
    fields = build_fields({"id": 99, "title": "Taco", "price": "9.5", "category": "mexican"})
    assert "id" not in fields
    assert fields["price"] == 9.5
    assert fields["img"] is None
    assert fields["desc"] is None


def test_build_fields_requires_object_with_price():
    with pytest.raises(ValidationFailedError):
        build_fields(["not", "an", "object"])
    with pytest.raises(ValidationFailedError):
        build_fields({"title": "No price"})


def test_changed_fields_only_keeps_supplied_keys():
    assert changed_fields({"price": "4", "id": 3, "unknown": "x"}) == {"price": 4.0}
    assert changed_fields({}) == {}


def test_merge_record_is_shallow_and_keeps_id():
    existing = {"id": 1, "title": "Old", "price": 1.0, "category": "c", "img": "i", "desc": "d"}
    merged = merge_record(existing, {"price": 2.0, "id": 5})
    assert merged == {**existing, "price": 2.0}
    assert existing["price"] == 1.0


def test_id_generators():
    assert next_sequential_id([]) == 1
    assert next_sequential_id([3, 9, 4]) == 10
    assert next_timestamp_id([], now=1700000000.5) == 1700000000500
    assert next_timestamp_id([1700000000500], now=1700000000.5) == 1700000000501


def test_pick_specials_returns_distinct_subset():
    items = list(range(10))
    picked = pick_specials(items, rng=random.Random(1))
    assert len(picked) == 4
    assert len(set(picked)) == 4
    assert set(picked) <= set(items)
    assert items == list(range(10))


def test_pick_specials_small_collections():
    assert pick_specials([], rng=random.Random(0)) == []
    assert sorted(pick_specials(["a", "b"], rng=random.Random(0))) == ["a", "b"]
    assert pick_specials([1, 2, 3], count=0) == []


@pytest.mark.parametrize("raw", ["1_0", "１２", " 5", "5 ", str(2**63), str(-(2**63) - 1), 2**64])
def test_parse_item_id_is_strict(raw):
    with pytest.raises(NotFoundError):
        parse_item_id(raw)


def test_parse_item_id_accepts_signed_64_bit_bounds():
    assert parse_item_id(str(2**63 - 1)) == 2**63 - 1
    assert parse_item_id(str(-(2**63))) == -(2**63)
    assert parse_item_id("+8") == 8


def test_text_fields_must_be_strings_or_missing():
    with pytest.raises(ValidationFailedError):
        build_fields({"title": ["a"], "price": 1})
    with pytest.raises(ValidationFailedError):
        changed_fields({"img": 5})
    assert changed_fields({"img": None}) == {"img": None}
