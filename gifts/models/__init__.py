from typing import Any

from gifts.models.gift import Gift
from gifts.models.christmas_gift import ChristmasGift


def is_gift(obj: Any) -> bool:
    return isinstance(obj, Gift)


def is_christmas_gift(obj: Any) -> bool:
    return isinstance(obj, ChristmasGift)


__all__ = ["Gift", "ChristmasGift", "is_gift", "is_christmas_gift"]
