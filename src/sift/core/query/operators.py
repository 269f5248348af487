# src/sift/core/query/operators.py
from enum import IntEnum
from typing import Any

from ..errors import UnsupportedOperator


class OperatorKind(IntEnum):
    """String-match operators, numbered like the admin filter form codes."""

    CONTAINS = 1
    NOT_CONTAINS = 2
    EQUAL = 3
    STARTS_WITH = 4
    ENDS_WITH = 5
    NOT_EQUAL = 6

    @classmethod
    def coerce(cls, kind: Any) -> "OperatorKind":
        """
        Resolve a member, its integer code or its query-string alias.

        Raises UnsupportedOperator for anything else.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            if kind.lower() in ALIASES:
                return ALIASES[kind.lower()]
        elif isinstance(kind, int) and not isinstance(kind, bool):
            try:
                return cls(kind)
            except ValueError:
                pass
        raise UnsupportedOperator(kind, list(cls))


# Maps each operator to the SQL comparison token used in the clause.
# For example, `?name[notcontains]=foo` renders `name NOT LIKE :p1`.
OPERATOR_MAP = {
    OperatorKind.CONTAINS: "LIKE",
    OperatorKind.STARTS_WITH: "LIKE",
    OperatorKind.ENDS_WITH: "LIKE",
    OperatorKind.NOT_CONTAINS: "NOT LIKE",
    OperatorKind.EQUAL: "=",
    OperatorKind.NOT_EQUAL: "<>",
}

# Substring operators mean nothing against an empty value.
MEANINGLESS_ON_EMPTY = {
    OperatorKind.CONTAINS,
    OperatorKind.STARTS_WITH,
    OperatorKind.ENDS_WITH,
    OperatorKind.NOT_CONTAINS,
}

# "Not X" must also match rows where the column has no value.
NULL_INCLUSIVE = {OperatorKind.NOT_CONTAINS, OperatorKind.NOT_EQUAL}

# Format applied to the bound value; `%` is the LIKE wildcard.
VALUE_FORMATS = {
    OperatorKind.EQUAL: "{}",
    OperatorKind.NOT_EQUAL: "{}",
    OperatorKind.STARTS_WITH: "{}%",
    OperatorKind.ENDS_WITH: "%{}",
    OperatorKind.CONTAINS: "%{}%",
    OperatorKind.NOT_CONTAINS: "%{}%",
}

# Operator names accepted in `field[operator]=value` request params.
ALIASES = {
    "contains": OperatorKind.CONTAINS,
    "notcontains": OperatorKind.NOT_CONTAINS,
    "eq": OperatorKind.EQUAL,
    "startswith": OperatorKind.STARTS_WITH,
    "endswith": OperatorKind.ENDS_WITH,
    "neq": OperatorKind.NOT_EQUAL,
}
