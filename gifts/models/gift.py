import logging
from decimal import Decimal, localcontext
from typing import Any

from gifts.exceptions import InvalidPriceError
from gifts.formatting import format_amount, format_price, parse_price, to_decimal

logger = logging.getLogger(__name__)


class Gift:
    """A gift with a name, a price and the url it was found on.

    The price is kept private. Reading ``price`` returns it formatted as
    currency; assigning to it parses and validates the new value.
    """

    kind = "gift"

    def __init__(self, name: str, price: Any, url: str):
        self.name = name
        self.__price: Decimal = to_decimal(price)
        self.url = url

    @property
    def price(self) -> str:
        return format_price(self.__price)

    @price.setter
    def price(self, value: Any) -> None:
        new_price = parse_price(value)
        if new_price is None:
            logger.warning("Rejected price %r for %s", value, self.name)
            raise InvalidPriceError(value)
        logger.debug("Price of %s changed from %s to %s", self.name, self.__price, new_price)
        self.__price = new_price

    @property
    def paper_amount(self) -> Decimal:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, self.__price.adjusted() + 10)
            return len(self.url) * len(self.name) * (self.__price / 10)

    def prepare(self) -> "Gift":
        print(f"This {self.name} is about to be wrapped!")
        return self

    def wrap(self) -> "Gift":
        print(f"Wrapping this {self.name} in {format_amount(self.paper_amount)}m² of paper!")
        return self

    def give(self, gifted: str) -> "Gift":
        print(f"Giving {self.name} to {gifted}.")
        return self

    def __str__(self) -> str:
        return f"\n    {self.name}: Price: {self.price}\n    Found on: {self.url}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"price={self.__price!r}, url={self.url!r})"
        )
