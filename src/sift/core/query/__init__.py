"""String-match predicate compilation."""

from sift.core.query.builder import QueryBuilder
from sift.core.query.compiler import SKIP, CompiledPredicate, ParameterNamer, compile
from sift.core.query.operators import OPERATOR_MAP, OperatorKind

__all__ = [
    "SKIP",
    "CompiledPredicate",
    "OPERATOR_MAP",
    "OperatorKind",
    "ParameterNamer",
    "QueryBuilder",
    "compile",
]
