from ..common.validators import RuleSet, required
from ..core.constants import MIN_PASSWORD_LENGTH

SIGN_UP = RuleSet(
    "sign-up",
    (
        required("username", min_length=1),
        required("password", min_length=MIN_PASSWORD_LENGTH),
    ),
)

SIGN_IN = RuleSet("sign-in", (required("username"), required("password")))
