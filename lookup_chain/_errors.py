from __future__ import annotations


class NotFoundError(Exception):
    """Lookup by identifier matched no record."""

    entity: str
    id: int

    def __init__(self, entity: str, id: int) -> None:
        self.entity = entity
        self.id = id
        super().__init__(f"{entity} {id} not found")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotFoundError):
            return NotImplemented
        return (self.entity, self.id) == (other.entity, other.id)

    def __hash__(self) -> int:
        return hash((self.entity, self.id))

    def __repr__(self) -> str:
        return f"NotFoundError(entity={self.entity!r}, id={self.id!r})"


__all__ = ("NotFoundError",)
