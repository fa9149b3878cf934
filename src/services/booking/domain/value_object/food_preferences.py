from dataclasses import dataclass


@dataclass(frozen=True)
class FoodPreferences:
    """食事の希望（いずれかの食事が選択されていれば食費が発生する）"""

    breakfast: bool = False
    lunch: bool = False
    dinner: bool = False
    snacks: bool = False
    special_diets: tuple[str, ...] = ()

    @property
    def is_active(self) -> bool:
        return self.breakfast or self.lunch or self.dinner or self.snacks
