from ..common.validators import RuleSet, optional, required

CREATE_LEAGUE = RuleSet("create-league", (required("name"), required("country"), required("season")))

UPDATE_LEAGUE = RuleSet(
    "update-league",
    (optional("name"), optional("country"), optional("season")),
    require_any=True,
)
