# src/sift/core/query/compiler.py
"""
Compiles a string-match request into a parameterized SQL clause.

The compiler is pure: the result depends only on the arguments, so it can
be called from any thread. Parameter names come from a `ParameterNamer`
the caller owns and shares across the predicates of one query.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict
from sqlalchemy import bindparam, text
from sqlalchemy.sql.elements import TextClause

from ..config import FilterOptions
from ..errors import UnsupportedOperator
from .operators import (
    MEANINGLESS_ON_EMPTY,
    NULL_INCLUSIVE,
    OPERATOR_MAP,
    VALUE_FORMATS,
    OperatorKind,
)


class _Skip:
    """Sentinel result: the filter should be left out of the query."""

    _instance: Optional["_Skip"] = None

    def __new__(cls) -> "_Skip":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "SKIP"


SKIP = _Skip()


class ParameterNamer:
    """Hands out unique bind parameter names: p1, p2, ..."""

    def __init__(self, prefix: str = "p"):
        self.prefix = prefix
        self._count = 0

    def __call__(self) -> str:
        self._count += 1
        return f"{self.prefix}{self._count}"


class CompiledPredicate(BaseModel):
    """A boolean clause plus the single value bound to its parameter."""

    model_config = ConfigDict(frozen=True)

    clause: str
    includes_null_check: bool
    parameter_name: str
    parameter_value: str
    column_ref: str
    kind: OperatorKind

    def as_text(self) -> TextClause:
        """Render as a SQLAlchemy text clause with the value bound."""
        return text(self.clause).bindparams(
            bindparam(self.parameter_name, value=self.parameter_value)
        )


def compile(
    kind: Any,
    raw_value: Optional[str],
    options: Optional[FilterOptions],
    column_ref: str,
    namer: Optional[ParameterNamer] = None,
) -> Union[CompiledPredicate, _Skip]:
    """
    Compile `column_ref <operator> :param` for a string-match request.

    Returns SKIP when the trimmed value is empty and an empty match is not
    meaningful for the operator. Raises UnsupportedOperator for an unknown
    kind, before looking at the value.
    """
    kind = OperatorKind.coerce(kind)
    options = options or FilterOptions()

    value = options.trim.apply(raw_value or "")

    if value == "" and (not options.allow_empty or kind in MEANINGLESS_ON_EMPTY):
        return SKIP

    if kind not in OPERATOR_MAP:
        raise UnsupportedOperator(kind, OPERATOR_MAP)
    operator = OPERATOR_MAP[kind]

    # Lowering against "" changes nothing but the clause shape.
    fold = options.force_case_insensitive and value != ""
    column = f"LOWER({column_ref})" if fold else column_ref
    if fold:
        value = value.lower()

    parameter_name = (namer or ParameterNamer())()
    clause = f"{column} {operator} :{parameter_name}"

    includes_null_check = kind in NULL_INCLUSIVE
    if includes_null_check:
        clause = f"({clause} OR {column_ref} IS NULL)"

    return CompiledPredicate(
        clause=clause,
        includes_null_check=includes_null_check,
        parameter_name=parameter_name,
        parameter_value=VALUE_FORMATS[kind].format(value),
        column_ref=column_ref,
        kind=kind,
    )
