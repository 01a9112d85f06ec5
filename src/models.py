"""Raw (untrusted) and normalized (trusted) receipt types."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class RawItem:
    short_description: str
    price: str


@dataclass
class RawReceipt:
    """Schema-checked receipt as decoded from the wire. Field values are unvalidated strings."""

    retailer: str
    purchase_date: str
    purchase_time: str
    total: str
    items: list[RawItem]

    @classmethod
    def from_payload(cls, data: dict) -> "RawReceipt":
        """Build from a payload that already passed validate_receipt_payload."""
        return cls(
            retailer=data["retailer"],
            purchase_date=data["purchaseDate"],
            purchase_time=data["purchaseTime"],
            total=data["total"],
            items=[RawItem(short_description=i["shortDescription"], price=i["price"]) for i in data["items"]],
        )


@dataclass(frozen=True)
class Item:
    short_description: str
    price_cents: int


@dataclass(frozen=True)
class Receipt:
    """Validated receipt. Amounts are integer cents; purchased_at is naive local time."""

    retailer: str
    purchased_at: datetime
    total_cents: int
    items: tuple[Item, ...]
