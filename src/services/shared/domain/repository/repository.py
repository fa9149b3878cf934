from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from services.shared.domain.entity.entity import Entity

EntityT = TypeVar("EntityT", bound=Entity)
IdT = TypeVar("IdT")


class Repository(ABC, Generic[EntityT, IdT]):
    """リポジトリの基底インターフェース

    save は新規作成のみ（同じキーが既にあれば DuplicateResourceException）。
    作成後の変更は、各リポジトリが条件付き更新メソッドとして個別に公開する。
    """

    @abstractmethod
    def save(self, entity: EntityT) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: IdT) -> EntityT | None:
        """強い整合性で読み取る。見つからなければ None"""
        raise NotImplementedError
