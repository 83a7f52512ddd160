from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import League


class LeagueRepository(Protocol):
    def create(self, **attrs: Any) -> League:
        raise NotImplementedError

    def get_by_id(self, entity_id: int) -> Optional[League]:
        raise NotImplementedError

    def exists(self, entity_id: int) -> bool:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[League]:
        raise NotImplementedError

    def update(self, entity_id: int, **attrs: Any) -> int:
        raise NotImplementedError

    def delete(self, entity_id: int) -> int:
        raise NotImplementedError
