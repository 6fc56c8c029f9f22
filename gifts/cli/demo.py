import logging

from gifts.config import settings
from gifts.models import ChristmasGift, Gift
from gifts.schemas.gift import GiftCreate


def main():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s:%(name)s: %(message)s",
    )

    marble_track = ChristmasGift("Marble Track", 42, "marbel.com", "Grandma")

    marble_track.prepare().wrap().give("Isaiah")
    print(marble_track.get_due())

    plain_gift = GiftCreate(
        name="Marble Track",
        price=65.48,
        url="marblemarb.le",
    )

    print(isinstance(marble_track, ChristmasGift))
    print(isinstance(marble_track, Gift))
    print(isinstance(plain_gift, Gift))


if __name__ == "__main__":
    main()
