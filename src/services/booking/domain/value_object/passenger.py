from dataclasses import dataclass

from services.shared.domain.exception import ValidationException

MAX_AGE = 120


@dataclass(frozen=True)
class Passenger:
    """乗客情報（性別は任意）"""

    name: str
    age: int
    email: str | None = None
    phone: str | None = None
    gender: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationException("Passenger name is required")
        if not 0 <= self.age <= MAX_AGE:
            raise ValidationException(f"Passenger age out of range: {self.age}")
