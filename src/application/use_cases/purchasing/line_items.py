from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from src.application.errors import ValidationError
from src.domain.models.purchase_order import LineItem
from src.domain.services.billing_aggregator import MAX_ADJUSTED_EXPONENT


@dataclass(slots=True)
class LineItemInput:
    name: str
    qty: Decimal
    unit: str
    price: Decimal
    item_id: int | None = None


def _too_large(value: Decimal) -> bool:
    return not value.is_finite() or (bool(value) and value.adjusted() > MAX_ADJUSTED_EXPONENT)


def build_line_items(
    items: list[LineItemInput], existing: Iterable[LineItem] = ()
) -> list[LineItem]:
    """Validate submitted lines and give new ones the next free item id.

    Ids of ``existing`` lines are never handed out again, even when the edit
    drops those lines, so receiving history stays with the line it was for.
    """
    if not items:
        raise ValidationError("A purchase order needs at least one item")
    used = [i.item_id for i in items if i.item_id is not None]
    used.extend(item.item_id for item in existing)
    next_id = max(used, default=0) + 1
    seen: set[int] = set()
    built: list[LineItem] = []
    for raw in items:
        name = raw.name.strip()
        if not name:
            raise ValidationError("Item name is required")
        if _too_large(raw.qty) or _too_large(raw.price):
            raise ValidationError(f"Quantity or price for {name} is out of range")
        if raw.qty <= 0:
            raise ValidationError(f"Quantity for {name} must be positive")
        if raw.price < 0:
            raise ValidationError(f"Price for {name} cannot be negative")
        item_id = raw.item_id
        if item_id is None:
            item_id = next_id
            next_id += 1
        if item_id in seen:
            raise ValidationError(f"Duplicate item id {item_id}")
        seen.add(item_id)
        built.append(
            LineItem(
                item_id=item_id, name=name, qty=raw.qty, unit=raw.unit.strip(), price=raw.price
            )
        )
    return built
