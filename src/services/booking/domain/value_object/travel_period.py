import math
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import cached_property

from services.shared.domain.exception import (
    InvalidDateRangeException,
    ValidationException,
)

SECONDS_PER_DAY = 24 * 60 * 60


def _parse(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class TravelPeriod:
    """旅行期間(開始日時 + 終了日時)

    日付のみ (YYYY-MM-DD) の場合は UTC の 0 時として扱う。
    """

    start: str
    end: str

    def __post_init__(self) -> None:
        try:
            start_at = self.start_at
            end_at = self.end_at
        except (TypeError, ValueError) as e:
            raise ValidationException(f"Invalid date format: {e}") from e

        if end_at <= start_at:
            raise InvalidDateRangeException("End date must be after start date")

    @cached_property
    def start_at(self) -> datetime:
        return _parse(self.start)

    @cached_property
    def end_at(self) -> datetime:
        return _parse(self.end)

    def number_of_days(self) -> int:
        """日数を計算する（端数は切り上げ）"""
        seconds = (self.end_at - self.start_at).total_seconds()
        return math.ceil(seconds / SECONDS_PER_DAY)
