from dataclasses import dataclass


@dataclass(frozen=True)
class TourId:
    """ツアーID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("TourId cannot be empty")

    def __str__(self) -> str:
        return self.value
