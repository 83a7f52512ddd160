from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Team


class TeamRepository(Protocol):
    def create(self, **attrs: Any) -> Team:
        raise NotImplementedError

    def get_by_id(self, entity_id: int) -> Optional[Team]:
        raise NotImplementedError

    def exists(self, entity_id: int) -> bool:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[Team]:
        raise NotImplementedError

    def update(self, entity_id: int, **attrs: Any) -> int:
        raise NotImplementedError

    def delete(self, entity_id: int) -> int:
        raise NotImplementedError
