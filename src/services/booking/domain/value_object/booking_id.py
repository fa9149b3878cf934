from __future__ import annotations

from dataclasses import dataclass

from services.shared.domain.value_object.reference import generate_reference

BOOKING_PREFIX = "STB"


@dataclass(frozen=True)
class BookingId:
    """予約番号（Value Object）

    例: STB-20260215093012345-7K2M9QX4ZD
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """新しい予約番号を発行する"""
        return cls(value=generate_reference(BOOKING_PREFIX))
