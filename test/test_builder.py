import pytest
from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    insert,
    select,
)

from sift.core.config import FilterOptions, TrimMode
from sift.core.errors import UnsupportedOperator
from sift.core.query.builder import QueryBuilder
from sift.core.query.operators import OperatorKind


def test_parse_params(users):
    params = {"name[startswith]": "ad", "email": "x", "limit": 10, "order_by": "id"}
    parsed = list(QueryBuilder(users, params).parse_params())

    assert parsed == [
        ("name", OperatorKind.STARTS_WITH, "ad"),
        ("email", OperatorKind.CONTAINS, "x"),
    ]


def test_unknown_columns_are_ignored(users):
    builder = QueryBuilder(users, {"nickname[eq]": "x", "name-x": "y"})
    assert list(builder.parse_params()) == []


def test_unknown_operator_raises(users):
    builder = QueryBuilder(users, {"name[gte]": "x"})
    with pytest.raises(UnsupportedOperator):
        builder.predicates()


def test_predicates_share_a_namer(users):
    params = {"name[eq]": "Ada", "email[notcontains]": "example.org"}
    predicates = QueryBuilder(users, params).predicates()

    assert [p.clause for p in predicates] == [
        "users.name = :p1",
        "(users.email NOT LIKE :p2 OR users.email IS NULL)",
    ]
    assert [p.parameter_value for p in predicates] == ["Ada", "%example.org%"]


def test_empty_values_are_skipped(users):
    params = {"name[contains]": "   ", "email[eq]": None, "id[neq]": "3"}
    predicates = QueryBuilder(users, params).predicates()

    assert len(predicates) == 1
    assert predicates[0].clause == "(users.id <> :p1 OR users.id IS NULL)"
    assert predicates[0].parameter_name == "p1"


def test_column_options_override_defaults(users):
    builder = QueryBuilder(
        users,
        {"name[eq]": " Ada ", "email[eq]": " A@B.C "},
        options=FilterOptions(force_case_insensitive=True),
        column_options={"email": FilterOptions(trim=TrimMode.NONE)},
    )
    name, email = builder.predicates()

    assert name.clause == "LOWER(users.name) = :p1"
    assert name.parameter_value == "ada"
    assert email.clause == "users.email = :p2"
    assert email.parameter_value == " A@B.C "


def test_alias(users):
    builder = QueryBuilder(users, {"name[endswith]": "son"}, alias="u")
    assert builder.predicates()[0].clause == "u.name LIKE :p1"


def test_build_adds_where_clauses(users):
    params = {"name[startswith]": "Ad", "email[neq]": "x@y.z", "offset": 5}
    statement = QueryBuilder(users, params).build(select(users))
    compiled = statement.compile()

    sql = str(compiled)
    assert "WHERE users.name LIKE :p1 AND (users.email <> :p2 OR users.email IS NULL)" in sql
    assert compiled.params == {"p1": "Ad%", "p2": "x@y.z"}


def test_build_without_filters_leaves_statement_alone(users):
    statement = select(users)
    assert QueryBuilder(users, {"limit": 1}).build(statement) is statement


@pytest.fixture
def orders() -> Table:
    return Table(
        "orders",
        MetaData(),
        Column("id", Integer, primary_key=True),
        Column("group", String(32)),
        Column("OrderRef", String(32)),
        Column("Full Name", String(64), key="full_name"),
    )


def test_reserved_and_mixed_case_columns_are_quoted(orders):
    params = {"group[eq]": "alpha", "OrderRef[neq]": "A1", "full_name[contains]": "x"}
    predicates = QueryBuilder(orders, params).predicates()

    assert [p.clause for p in predicates] == [
        'orders."group" = :p1',
        '(orders."OrderRef" <> :p2 OR orders."OrderRef" IS NULL)',
        'orders."Full Name" LIKE :p3',
    ]


def test_where_quotes_columns_like_select_list(orders):
    statement = QueryBuilder(orders, {"group[eq]": "alpha"}).build(select(orders))
    sql = str(statement.compile())

    assert 'SELECT orders.id, orders."group"' in sql
    assert 'WHERE orders."group" = :p1' in sql


def test_where_clause_runs_against_sqlite(orders):
    engine = create_engine("sqlite://")
    orders.metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(
            insert(orders),
            [
                {"id": 1, "group": "alpha", "OrderRef": "A1", "full_name": "Ada"},
                {"id": 2, "group": "beta", "OrderRef": None, "full_name": "Bob"},
            ],
        )

    params = {"group[eq]": "alpha"}
    statement = QueryBuilder(orders, params, dialect=engine.dialect).build(select(orders.c.id))
    with engine.connect() as conn:
        assert conn.execute(statement).scalars().all() == [1]

    params = {"OrderRef[neq]": "A1"}
    statement = QueryBuilder(orders, params, dialect=engine.dialect).build(select(orders.c.id))
    with engine.connect() as conn:
        assert conn.execute(statement).scalars().all() == [2]


def test_quoted_alias(orders):
    builder = QueryBuilder(orders, {"group[eq]": "a"}, alias="Order")
    assert builder.predicates()[0].clause == '"Order"."group" = :p1'
