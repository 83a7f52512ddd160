from ..common.validators import RuleSet, optional, required
from ..core.enums import FieldKind

CREATE_MATCH = RuleSet(
    "create-match",
    (
        required("played", FieldKind.ISO_DATE),
        required("venue"),
        required("score"),
        required("outcome", FieldKind.INTEGER),
        required("leagueId", FieldKind.INTEGER),
        required("host", FieldKind.INTEGER),
        required("guest", FieldKind.INTEGER),
    ),
)

UPDATE_MATCH = RuleSet(
    "update-match",
    (
        optional("played", FieldKind.ISO_DATE),
        optional("venue"),
        optional("score"),
        optional("outcome", FieldKind.INTEGER),
    ),
    require_any=True,
)
