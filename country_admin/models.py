from datetime import datetime, UTC
from typing import Optional

from sqlalchemy import TIMESTAMP, func
from sqlmodel import Column, Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


class Country(SQLModel, table=True):
    __tablename__ = "country"
    country_id: Optional[int] = Field(default=None, primary_key=True)
    country: str = Field(nullable=False)
    last_update: Optional[datetime] = Field(
        default_factory=utc_now,
        sa_column=Column(
            TIMESTAMP(timezone=True),
            nullable=False,
            onupdate=utc_now,
            server_default=func.now(),
        ),
    )
