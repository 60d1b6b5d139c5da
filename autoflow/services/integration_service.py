"""Integration service.

Serves the built-in integration catalog together with user-created entries.
"""

import structlog

from autoflow.models.integration import Integration, IntegrationCreate
from autoflow.services.store import InMemoryStore

logger = structlog.get_logger()


class IntegrationServiceError(Exception):
    """Error in integration service operations."""

    pass


class IntegrationNotFoundError(IntegrationServiceError):
    """Integration not found."""

    pass


class IntegrationService:
    """Service for listing and registering integrations.

    A user sees the built-in catalog (no owner) plus the integrations
    they created themselves.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    @staticmethod
    def _visible_to(integration: Integration, user_id: str) -> bool:
        return integration.user_id is None or integration.user_id == user_id

    def list_all(self, user_id: str) -> list[Integration]:
        return [i for i in self._store.integrations if self._visible_to(i, user_id)]

    def get(self, integration_id: str, user_id: str) -> Integration:
        """Get an integration.

        Raises:
            IntegrationNotFoundError: If it doesn't exist or is not visible to the user
        """
        integration = self._store.find_integration(integration_id)
        if integration is None or not self._visible_to(integration, user_id):
            raise IntegrationNotFoundError("Integration not found")
        return integration

    def create(self, user_id: str, data: IntegrationCreate) -> Integration:
        integration = Integration(
            user_id=user_id,
            name=data.name,
            type=data.type,
            description=data.description,
            config=data.config,
        )
        self._store.integrations.append(integration)

        logger.info(
            "integration_created",
            integration_id=integration.id,
            integration_type=integration.type,
            user_id=user_id,
        )
        return integration

    def count(self, user_id: str) -> int:
        return len(self.list_all(user_id))
