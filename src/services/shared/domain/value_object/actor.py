from dataclasses import dataclass, field

from services.shared.domain.enum.capability import ROLE_CAPABILITIES, Capability
from services.shared.domain.enum.role import Role


@dataclass(frozen=True)
class Actor:
    """操作主体（認証済みユーザー）

    capabilities を明示しない場合はロールの既定権限セットを使う。
    """

    user_id: str
    role: Role
    capabilities: frozenset[Capability] = field(default=frozenset())

    def __post_init__(self) -> None:
        if not self.user_id:
            raise ValueError("Actor user_id cannot be empty")
        if not self.capabilities:
            object.__setattr__(self, "capabilities", ROLE_CAPABILITIES[self.role])

    def can(self, capability: Capability) -> bool:
        """権限を持っているかどうか"""
        return capability in self.capabilities

    @property
    def is_driver(self) -> bool:
        return self.role == Role.DRIVER
