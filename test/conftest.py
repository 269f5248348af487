import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table


@pytest.fixture
def users() -> Table:
    metadata = MetaData()
    return Table(
        "users",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("name", String(64)),
        Column("email", String(128), nullable=True),
    )
