import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel


def new_etag() -> str:
    """Opaque concurrency tag assigned to a row on every write."""
    return f'W/"{uuid.uuid4().hex}"'


class TableEntity(SQLModel, table=False):
    """Base row for the keyed table store.

    Rows are addressed by ``(partition_key, row_key)``. The timestamp and
    ETag are managed by the store and carry no application meaning.
    """

    partition_key: str = Field(
        default="",
        primary_key=True,
        description="Grouping key; constant for every row in this table",
    )
    row_key: str = Field(
        primary_key=True,
        description="Unique key of the row within its partition",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
    etag: str = Field(
        default_factory=new_etag,
        nullable=False,
        sa_column_kwargs={"onupdate": new_etag},
    )
