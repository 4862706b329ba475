"""
Integration connection model.

Connection flags for the stubbed wearable integrations.  One row per user
per provider.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class IntegrationConnection(SQLModel, table=True):
    __tablename__ = "integration_connections"
    __table_args__ = (UniqueConstraint("user_id", "provider", name="uq_integration_user_provider"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    provider: str = Field(nullable=False, max_length=20)
    connected: bool = Field(default=False)
    last_sync: Optional[datetime.datetime] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
