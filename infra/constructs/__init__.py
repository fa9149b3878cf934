from .api import Api
from .database import Database
from .functions import Functions
from .layers import Layers
from .observability import Observability

__all__ = ["Api", "Database", "Functions", "Layers", "Observability"]
