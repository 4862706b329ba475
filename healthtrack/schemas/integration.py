"""
Integration API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel

from healthtrack.models.health import HealthSource


class IntegrationStatus(BaseModel):
    provider: HealthSource
    connected: bool
    last_sync: Optional[datetime.datetime]


class IntegrationConnectResponse(BaseModel):
    message: str
    status: IntegrationStatus
