from ..common.validators import RuleSet, optional, required
from ..core.enums import FieldKind

COUNTERS = ("goals", "assists", "saves", "yellow", "red", "minutes")

CREATE_STAT = RuleSet(
    "create-stat",
    tuple(required(name, FieldKind.INTEGER) for name in (*COUNTERS, "matchId", "playerId")),
)

UPDATE_STAT = RuleSet(
    "update-stat",
    tuple(optional(name, FieldKind.INTEGER) for name in COUNTERS),
    require_any=True,
)
