from typing import Any


class InvalidPriceError(TypeError):
    """Raised when a price cannot be read as a finite number."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__("Price must be a number")
