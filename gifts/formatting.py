import math
import re
from datetime import date
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

from babel.dates import format_date
from babel.numbers import format_currency

from gifts.config import settings
from gifts.exceptions import InvalidPriceError

NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_price(value: Any) -> Decimal | None:
    """Read the leading number out of ``value``.

    Mirrors a lenient float parse: surrounding whitespace is ignored and
    trailing garbage after a valid number is dropped (``"12abc"`` reads as 12).
    Returns ``None`` when no finite number can be read. Magnitudes beyond
    the float range (``"1e400"``) count as infinite.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal):
        number = value
    else:
        match = NUMBER_PREFIX.match(str(value).strip())
        if match is None:
            return None
        try:
            number = Decimal(match.group())
        except InvalidOperation:
            return None
    if not number.is_finite() or not math.isfinite(float(number)):
        return None
    return number


def to_decimal(value: Any) -> Decimal:
    """Read a constructor price.

    Uses the same lenient reading as the price setter but without logging.
    A value nothing can be read from still raises ``InvalidPriceError``, so
    a constructed gift always holds a finite price.
    """
    number = parse_price(value)
    if number is None:
        raise InvalidPriceError(value)
    return number


def format_price(amount: Decimal) -> str:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 10)
        return format_currency(amount, settings.currency, locale=settings.locale)


def format_due(due: date) -> str:
    return format_date(due, format="medium", locale=settings.locale)


def format_amount(amount: Decimal) -> str:
    """Plain number without trailing zeros, e.g. ``200`` or ``23.1``."""
    return f"{amount.normalize():f}"
