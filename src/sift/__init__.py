"""
sift-py: compile string-match filters into parameterized SQL clauses.
"""

from sift.core.config import FilterOptions, TrimMode
from sift.core.errors import SiftError, UnsupportedOperator
from sift.core.query.builder import QueryBuilder
from sift.core.query.compiler import (
    SKIP,
    CompiledPredicate,
    ParameterNamer,
    compile,
)
from sift.core.query.operators import OperatorKind

__version__ = "0.1.0"

__all__ = [
    "SKIP",
    "CompiledPredicate",
    "FilterOptions",
    "OperatorKind",
    "ParameterNamer",
    "QueryBuilder",
    "SiftError",
    "TrimMode",
    "UnsupportedOperator",
    "compile",
]
