from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Match


class MatchRepository(Protocol):
    def create(self, **attrs: Any) -> Match:
        raise NotImplementedError

    def get_by_id(self, entity_id: int) -> Optional[Match]:
        raise NotImplementedError

    def exists(self, entity_id: int) -> bool:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[Match]:
        raise NotImplementedError

    def update(self, entity_id: int, **attrs: Any) -> int:
        raise NotImplementedError

    def delete(self, entity_id: int) -> int:
        raise NotImplementedError
