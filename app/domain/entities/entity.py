"""Base class for domain entities compared by identity."""

from typing import Any, Generic, TypeVar

IdType = TypeVar("IdType")


class Entity(Generic[IdType]):
    """An object whose equality is defined by its identifier alone."""

    def __init__(self, id: IdType):
        self._id = id

    @property
    def id(self) -> IdType:
        return self._id

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Entity) or type(other) is not type(self):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self._id})>"
