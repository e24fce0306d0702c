"""Domain helpers for menu items: field list, coercion, building and merging."""
from __future__ import annotations

import math
import re
import time
from typing import Any, Iterable, Mapping

from menu_api.core.errors import NotFoundError, ValidationFailedError

FIELDS = ("title", "price", "category", "img", "desc")
TEXT_FIELDS = ("title", "category", "img", "desc")

# ids are stored as signed 64-bit integers
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1
ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def coerce_price(value: Any) -> float | int:
    """Return ``value`` as a number, parsing numeric strings."""
    if isinstance(value, bool) or value is None:
        raise ValidationFailedError("price must be a number")
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValidationFailedError("price must be a number") from None
    else:
        raise ValidationFailedError("price must be a number")
    if isinstance(number, float) and not math.isfinite(number):
        raise ValidationFailedError("price must be a finite number")
    return number


def parse_item_id(raw: Any) -> int:
    """Coerce a path segment to an item id; anything that is not a storable integer cannot match."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        item_id = raw
    else:
        text = "" if raw is None else str(raw)
        if not ID_PATTERN.fullmatch(text):
            raise NotFoundError()
        item_id = int(text)
    if not ID_MIN <= item_id <= ID_MAX:
        raise NotFoundError()
    return item_id


def _require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationFailedError("Request body must be a JSON object")
    return payload


def _check_text(fields: Mapping[str, Any]) -> None:
    for name in TEXT_FIELDS:
        value = fields.get(name)
        if value is not None and not isinstance(value, str):
            raise ValidationFailedError(f"{name} must be a string")


def build_fields(payload: Any) -> dict:
    """Fields for a new record; ``id`` in the payload is ignored."""
    payload = _require_mapping(payload)
    if "price" not in payload:
        raise ValidationFailedError("price is required")
    fields = {name: payload.get(name) for name in FIELDS}
    _check_text(fields)
    fields["price"] = coerce_price(fields["price"])
    return fields


def changed_fields(payload: Any) -> dict:
    """Subset of known fields supplied in an update payload."""
    payload = _require_mapping(payload)
    changes = {name: payload[name] for name in FIELDS if name in payload}
    _check_text(changes)
    if "price" in changes:
        changes["price"] = coerce_price(changes["price"])
    return changes


def to_record(item_id: int, fields: Mapping[str, Any]) -> dict:
    record = {"id": item_id}
    for name in FIELDS:
        record[name] = fields.get(name)
    return record


def merge_record(existing: Mapping[str, Any], changes: Mapping[str, Any]) -> dict:
    """Shallow merge: supplied fields win, everything else is kept."""
    merged = dict(existing)
    merged.update(changes)
    merged["id"] = existing["id"]
    return merged


def next_sequential_id(existing_ids: Iterable[int]) -> int:
    return max(existing_ids, default=0) + 1


def next_timestamp_id(existing_ids: Iterable[int], now: float | None = None) -> int:
    """Millisecond timestamp id, bumped past the current maximum on collision."""
    candidate = int((time.time() if now is None else now) * 1000)
    highest = max(existing_ids, default=0)
    if candidate <= highest:
        candidate = highest + 1
    return candidate
