from ..common.validators import RuleSet, optional, required
from ..core.enums import FieldKind

CREATE_TEAM = RuleSet(
    "create-team",
    (
        required("name"),
        required("venue"),
        required("founded", FieldKind.ISO_DATE),
        required("city"),
        required("country"),
    ),
)

UPDATE_TEAM = RuleSet(
    "update-team",
    (
        optional("name"),
        optional("venue"),
        optional("founded", FieldKind.ISO_DATE),
        optional("city"),
        optional("country"),
    ),
    require_any=True,
)
