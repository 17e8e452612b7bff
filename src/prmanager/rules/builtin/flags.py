"""Built-in flag rules. Each is evaluated independently."""

from prmanager.rules.models import FileFacts, Flag, FlagRule


def _deletes_more_than_adds(facts: FileFacts) -> bool:
    return facts.deletions > facts.additions


TOUCHES_AUTH = FlagRule(
    id="touches_auth",
    flag=Flag.TOUCHES_AUTH,
    description="Path looks security or authentication related.",
    path_keywords=["auth", "security", "acl", "jwt", "oauth", "crypto"],
)

TOUCHES_PAYMENT = FlagRule(
    id="touches_payment",
    flag=Flag.TOUCHES_PAYMENT,
    description="Path looks payment or billing related.",
    path_keywords=["payment", "billing", "stripe", "paypal"],
)

IS_RENAME = FlagRule(
    id="is_rename",
    flag=Flag.IS_RENAME,
    description="Upstream reports the file as renamed.",
    statuses=["renamed"],
)

DELETES_GT_ADDITIONS = FlagRule(
    id="deletes_gt_additions",
    flag=Flag.DELETES_GT_ADDITIONS,
    description="More lines removed than added.",
    predicate=_deletes_more_than_adds,
)

# Any exported or public definition in the patch counts.
CHANGES_PUBLIC_API = FlagRule(
    id="changes_public_api",
    flag=Flag.CHANGES_PUBLIC_API,
    description="Patch touches exported or public definitions.",
    patch_keywords=["export ", "public ", "def ", "function "],
)

ALL_FLAG_RULES = [
    TOUCHES_AUTH,
    TOUCHES_PAYMENT,
    IS_RENAME,
    DELETES_GT_ADDITIONS,
    CHANGES_PUBLIC_API,
]
