# src/sift/core/query/builder.py
import re
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from rich.markup import escape
from sqlalchemy import Select, Table
from sqlalchemy.engine import Dialect, default

from ..config import FilterOptions
from ..errors import UnsupportedOperator
from ..logging import color_palette, log
from .compiler import CompiledPredicate, ParameterNamer, compile
from .operators import OperatorKind

# `name[op]` or a bare `name`, which means "contains".
_PARAM_KEY = re.compile(r"^(?P<field>[A-Za-z_][A-Za-z0-9_]*)(?:\[(?P<op>[^\]]*)\])?$")

# Pagination and ordering params are not filters.
RESERVED_PARAMS = {"limit", "offset", "order_by", "order_dir"}


class QueryBuilder:
    """
    Adds string-match filters from API request parameters to a SQLAlchemy
    select. It only builds the statement; executing it is up to the caller.
    """

    def __init__(
        self,
        table: Table,
        params: Mapping[str, Any],
        options: Optional[FilterOptions] = None,
        column_options: Optional[Dict[str, FilterOptions]] = None,
        alias: Optional[str] = None,
        dialect: Optional[Dialect] = None,
    ):
        self.table = table
        self.params = params
        self.options = options or FilterOptions()
        self.column_options = column_options or {}
        self.alias = alias or table.name
        # Identifiers are quoted the way the dialect quotes the SELECT list.
        self.preparer = (dialect or default.DefaultDialect()).identifier_preparer

    def parse_params(self) -> Iterator[Tuple[str, OperatorKind, Any]]:
        """Yield (column, operator, raw value) for each filter param."""
        for key, value in self.params.items():
            match = _PARAM_KEY.match(key)
            if match is None or match["field"] in RESERVED_PARAMS:
                continue

            field = match["field"]
            if field not in self.table.c:
                log.warn(
                    f"Ignoring filter on unknown column {color_palette['column'](field)} "
                    f"of {color_palette['table'](self.table.name)}"
                )
                continue

            op = match["op"]
            try:
                kind = OperatorKind.CONTAINS if op is None else OperatorKind.coerce(op)
            except UnsupportedOperator as e:
                log.error(f"Invalid filter '{escape(key)}': {escape(str(e))}")
                raise
            yield field, kind, value

    def column_ref(self, field: str) -> str:
        """Quoted `alias.column` for the column keyed `field`."""
        column = self.table.c[field]
        return f"{self.preparer.quote(self.alias)}.{self.preparer.quote(column.name)}"

    def predicates(self) -> List[CompiledPredicate]:
        """Compile every filter with one shared namer, dropping skipped ones."""
        namer = ParameterNamer()
        compiled: List[CompiledPredicate] = []

        for field, kind, value in self.parse_params():
            options = self.column_options.get(field, self.options)
            predicate = compile(
                kind,
                None if value is None else str(value),
                options,
                self.column_ref(field),
                namer,
            )
            if not predicate:
                log.debug(
                    f"Skipped {color_palette['column'](field)} "
                    f"{color_palette['operator'](kind.name)}: empty value"
                )
                continue

            log.debug(
                f"{escape(predicate.clause)} with "
                f"{color_palette['param'](predicate.parameter_name)} = "
                f"{color_palette['value'](predicate.parameter_value)}"
            )
            compiled.append(predicate)

        return compiled

    def build(self, statement: Select) -> Select:
        """Applies the parsed filters to `statement` (AND-combined)."""
        for predicate in self.predicates():
            statement = statement.where(predicate.as_text())
        return statement
