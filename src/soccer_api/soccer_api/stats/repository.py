from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Stat


class StatRepository(Protocol):
    def create(self, **attrs: Any) -> Stat:
        raise NotImplementedError

    def get_by_id(self, entity_id: int) -> Optional[Stat]:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[Stat]:
        raise NotImplementedError

    def list_by_player(self, player_id: int) -> Sequence[Stat]:
        raise NotImplementedError

    def get_by_player_and_match(self, player_id: int, match_id: int) -> Optional[Stat]:
        raise NotImplementedError

    def update(self, entity_id: int, **attrs: Any) -> int:
        raise NotImplementedError

    def delete(self, entity_id: int) -> int:
        raise NotImplementedError
