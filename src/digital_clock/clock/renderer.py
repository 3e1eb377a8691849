"""Text rendering of local time fields."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocalTimeFields:
    """Hour, minute and second of an instant in host local time."""

    hour: int
    minute: int
    second: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute out of range: {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second out of range: {self.second}")


def render(fields: LocalTimeFields, zero_pad: bool = True) -> str:
    """
    Render fields as ``H:M:S``.

    Args:
        fields: Local time fields to render
        zero_pad: Two digits per field (``09:05:03``) when True,
            plain numbers (``9:5:3``) when False

    Returns:
        Rendered time, without a trailing newline
    """
    if zero_pad:
        return f"{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}"
    return f"{fields.hour}:{fields.minute}:{fields.second}"
