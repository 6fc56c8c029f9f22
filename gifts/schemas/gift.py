from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from gifts.models.christmas_gift import ChristmasGift
from gifts.models.gift import Gift


class GiftCreate(BaseModel):
    name: str
    price: Decimal
    url: str

    def to_gift(self) -> Gift:
        return Gift(self.name, self.price, self.url)


class ChristmasGiftCreate(GiftCreate):
    recipient_assignee: str

    def to_gift(self) -> ChristmasGift:
        return ChristmasGift(
            self.name, self.price, self.url, self.recipient_assignee
        )


class GiftRead(BaseModel):
    kind: str
    name: str
    price: str
    url: str

    model_config = {"from_attributes": True}


class ChristmasGiftRead(GiftRead):
    recipient_assignee: str
    due: date
