class ColorError(ValueError):
    """Base class for the errors raised by the strict API."""


class InvalidHexInput(ColorError):
    """A hex color or byte string is empty, mis-sized or has non-hex digits."""


class OutOfRangeChannel(ColorError):
    """A channel value lies outside the range of its color space."""

    def __init__(self, name: str, value: float, low: float, high: float) -> None:
        self.name = name
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"{name}={value!r} is outside [{low}, {high}]")


class ChannelRangeWarning(UserWarning):
    """Emitted instead of OutOfRangeChannel when validation runs in warn mode."""
