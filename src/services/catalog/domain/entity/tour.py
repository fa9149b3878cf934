from services.catalog.domain.value_object import TourId
from services.shared.domain import Entity, Money


class Tour(Entity[TourId]):
    """ツアー

    base_price_per_day / price_per_km は表示用。予約料金の計算には車両の料金を使う。
    """

    def __init__(
        self,
        id: TourId,
        name: str,
        location: str,
        area: str,
        duration_days: int,
        base_price_per_day: Money,
        price_per_km: Money,
    ) -> None:
        super().__init__(id)
        if not name or not name.strip():
            raise ValueError("Tour name cannot be empty")
        if duration_days < 1:
            raise ValueError("Tour duration must be at least one day")
        self._name = name.strip()
        self._location = location
        self._area = area
        self._duration_days = duration_days
        self._base_price_per_day = base_price_per_day
        self._price_per_km = price_per_km

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return self._location

    @property
    def area(self) -> str:
        return self._area

    @property
    def duration_days(self) -> int:
        return self._duration_days

    @property
    def base_price_per_day(self) -> Money:
        return self._base_price_per_day

    @property
    def price_per_km(self) -> Money:
        return self._price_per_km
