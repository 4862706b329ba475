"""
Report database model.

``content`` is a JSON snapshot assembled when the report is generated; it
does not reference the measurement rows it was built from.  ``user_id`` is a
plain column (no foreign key) so reports outlive a deleted patient.
"""

import datetime
from enum import Enum
from typing import Any, Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class ReportType(str, Enum):
    individual = "individual"
    group = "group"


class ReportFormat(str, Enum):
    pdf = "pdf"
    excel = "excel"


class Report(SQLModel, table=True):
    __tablename__ = "reports"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    professional_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    type: str = Field(nullable=False, max_length=20)
    format: str = Field(nullable=False, max_length=20)
    date: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, nullable=False, index=True)

    content: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False), )

    shared: bool = Field(default=False)
    access_code: Optional[str] = Field(default=None, unique=True, index=True, max_length=64)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
