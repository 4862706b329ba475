"""
Integration connection repository.
"""

from typing import Optional

from sqlmodel import Session, select

from healthtrack.models.integration import IntegrationConnection


class IntegrationRepository:
    """Repository for IntegrationConnection database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_user_and_provider(self, user_id: int, provider: str) -> Optional[IntegrationConnection]:
        statement = select(IntegrationConnection).where(IntegrationConnection.user_id == user_id,
                                                        IntegrationConnection.provider == provider, )
        return self.session.exec(statement).first()

    def get_all_by_user(self, user_id: int) -> list[IntegrationConnection]:
        statement = (select(IntegrationConnection).where(IntegrationConnection.user_id == user_id)
                     .order_by(IntegrationConnection.provider))
        return list(self.session.exec(statement).all())

    def save(self, connection: IntegrationConnection) -> IntegrationConnection:
        self.session.add(connection)
        self.session.commit()
        self.session.refresh(connection)
        return connection

    def delete_by_user(self, user_id: int) -> int:
        connections = self.get_all_by_user(user_id)
        for connection in connections:
            self.session.delete(connection)
        self.session.commit()
        return len(connections)
