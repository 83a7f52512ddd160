from __future__ import annotations

from typing import Any, Mapping

from ..core.constants import DEFAULT_PAGE_LIMIT, DEFAULT_PAGE_OFFSET, MAX_DB_INT, MAX_PAGE_LIMIT
from ..core.exceptions import MalformedIdentifierError, NotFoundError, ValidationError


def parse_id(value: str, entity: str) -> int:
    """Parse a decimal path identifier before it ever reaches a query.

    Ids beyond the column range cannot exist, so they are reported as not found.
    """
    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        raise MalformedIdentifierError(entity)
    entity_id = int(value)
    if entity_id > MAX_DB_INT:
        raise NotFoundError(entity, entity_id)
    return entity_id


def page_params(args: Mapping[str, Any]) -> tuple[int, int]:
    """Read `offset`/`limit` query parameters."""

    violations: list[str] = []

    def _int(name: str, default: int) -> int:
        raw = args.get(name)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except (TypeError, ValueError):
            violations.append(f"{name} must be an integer number")
            return default

    offset = _int("offset", DEFAULT_PAGE_OFFSET)
    limit = _int("limit", DEFAULT_PAGE_LIMIT)

    if offset < 0:
        violations.append("offset must not be less than 0")
    elif offset > MAX_DB_INT:
        violations.append(f"offset must not be greater than {MAX_DB_INT}")
    if not 1 <= limit <= MAX_PAGE_LIMIT:
        violations.append(f"limit must be between 1 and {MAX_PAGE_LIMIT}")

    if violations:
        raise ValidationError("Invalid pagination parameters", violations)
    return offset, limit
