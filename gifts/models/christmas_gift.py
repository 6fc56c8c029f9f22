from datetime import date
from typing import Any

from gifts.config import settings
from gifts.formatting import format_due
from gifts.models.gift import Gift


def christmas_due_date(today: date | None = None) -> date:
    today = today or date.today()
    return date(today.year, settings.due_month, settings.due_day)


class ChristmasGift(Gift):
    kind = "christmas"

    def __init__(self, name: str, price: Any, url: str, recipient_assignee: str):
        super().__init__(name, price, url)
        self.recipient_assignee = recipient_assignee
        self.__due = christmas_due_date()

    @property
    def due(self) -> date:
        return self.__due

    def give(self, gifted: str) -> "ChristmasGift":
        print(f"HoHoHo from {self.recipient_assignee} to {gifted}")
        return self

    def get_due(self) -> str:
        return format_due(self.__due)
