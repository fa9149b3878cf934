from dataclasses import dataclass


@dataclass(frozen=True)
class DriverId:
    """ドライバーID（ドライバープロフィールのID。ユーザーIDとは別）"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("DriverId cannot be empty")

    def __str__(self) -> str:
        return self.value
