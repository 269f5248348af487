# examples/main.py
"""
sift-py: build a filtered SELECT from request-style params and print it.
"""

from sqlalchemy import Column, Integer, MetaData, String, Table, select

from sift import FilterOptions, QueryBuilder
from sift.core.logging import color_palette, log
from sift.ui import display_predicates

metadata = MetaData()
users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(64)),
    Column("email", String(128), nullable=True),
)


def run():
    params = {
        "name[startswith]": "  Ada ",
        "email[notcontains]": "example.org",
        "limit": 10,
    }

    log.section("Compiling filters")
    with log.timed(f"Filters for {color_palette['table']('users')}"):
        builder = QueryBuilder(
            users, params, options=FilterOptions(force_case_insensitive=True)
        )
        predicates = builder.predicates()

    display_predicates(predicates)

    statement = builder.build(select(users))
    log.info(str(statement))
    log.success(f"Applied {len(predicates)} filters")


if __name__ == "__main__":
    run()
