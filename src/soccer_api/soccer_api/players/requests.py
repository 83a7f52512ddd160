from ..common.validators import RuleSet, optional, required
from ..core.enums import FieldKind

CREATE_PLAYER = RuleSet(
    "create-player",
    (
        required("firstname"),
        required("lastname"),
        required("numero", FieldKind.INTEGER),
        required("birthdate", FieldKind.ISO_DATE),
        optional("country"),
        optional("position"),
        optional("teamId", FieldKind.INTEGER),
    ),
)

UPDATE_PLAYER = RuleSet(
    "update-player",
    (
        optional("country"),
        optional("numero", FieldKind.INTEGER),
        optional("position"),
        optional("teamId", FieldKind.INTEGER),
    ),
    require_any=True,
)
