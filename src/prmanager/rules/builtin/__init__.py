"""Built-in rules — type precedence list and flag rules."""

from prmanager.rules.builtin.flags import ALL_FLAG_RULES
from prmanager.rules.builtin.types import ALL_TYPE_RULES

__all__ = ["ALL_FLAG_RULES", "ALL_TYPE_RULES"]
