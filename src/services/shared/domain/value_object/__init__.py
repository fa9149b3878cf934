from .actor import Actor
from .currency import Currency
from .iso_date_time import IsoDateTime
from .money import Money
from .reference import generate_reference

__all__ = ["Actor", "Currency", "Money", "IsoDateTime", "generate_reference"]
