"""
Wearable integration service.

Connections are stubs: connecting only records the flag and a sync time,
no provider OAuth flow runs.
"""

import datetime

from loguru import logger
from sqlmodel import Session

from healthtrack.db.repositories.integration import IntegrationRepository
from healthtrack.models.health import HealthSource
from healthtrack.models.integration import IntegrationConnection
from healthtrack.models.user import User
from healthtrack.schemas.integration import IntegrationConnectResponse, IntegrationStatus

DISPLAY_NAMES = {
    HealthSource.garmin: "Garmin",
    HealthSource.google_fit: "Google Fit",
    HealthSource.apple_health: "Apple Health",
}


class IntegrationService:
    """Service for integration connection flags."""

    def __init__(self, session: Session):
        self.repository = IntegrationRepository(session)

    def connect(self, user: User, provider: HealthSource) -> IntegrationConnectResponse:
        """Mark *provider* connected for *user*, with ``last_sync`` set to now."""
        now = datetime.datetime.utcnow()
        connection = self.repository.get_by_user_and_provider(user.id, provider.value)
        if connection is None:
            connection = IntegrationConnection(user_id=user.id, provider=provider.value)

        connection.connected = True
        connection.last_sync = now
        connection.updated_at = now
        connection = self.repository.save(connection)
        logger.info(f"User id={user.id} connected {provider.value}")

        return IntegrationConnectResponse(message=f"{DISPLAY_NAMES[provider]} account connected successfully",
                                          status=self._to_status(connection), )

    def status(self, user: User) -> dict[str, IntegrationStatus]:
        """Status of every provider; providers never connected report ``connected=False``."""
        stored = {c.provider: c for c in self.repository.get_all_by_user(user.id)}
        result = {}
        for provider in HealthSource:
            connection = stored.get(provider.value)
            if connection is None:
                result[provider.value] = IntegrationStatus(provider=provider, connected=False, last_sync=None)
            else:
                result[provider.value] = self._to_status(connection)
        return result

    @staticmethod
    def _to_status(connection: IntegrationConnection) -> IntegrationStatus:
        return IntegrationStatus(provider=connection.provider, connected=connection.connected,
                                 last_sync=connection.last_sync, )
