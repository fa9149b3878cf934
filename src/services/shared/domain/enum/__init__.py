from .capability import ROLE_CAPABILITIES, Capability
from .role import Role

__all__ = ["Role", "Capability", "ROLE_CAPABILITIES"]
