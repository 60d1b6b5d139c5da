"""In-memory record store.

Holds every collection the API serves. Nothing is persisted: the store is
rebuilt from the seed catalogs on process start.
"""

from functools import lru_cache

import structlog

from autoflow.models.execution import Execution
from autoflow.models.integration import Integration
from autoflow.models.template import Template
from autoflow.models.user import User
from autoflow.models.workflow import Workflow

logger = structlog.get_logger()


def default_integrations() -> list[Integration]:
    """Built-in integration catalog."""
    return [
        Integration(
            id="github-1",
            name="GitHub",
            type="github",
            description="GitHub repository management and automation",
        ),
        Integration(
            id="slack-1",
            name="Slack",
            type="slack",
            description="Slack messaging and notifications",
        ),
        Integration(
            id="openai-1",
            name="OpenAI",
            type="openai",
            description="AI-powered content generation and analysis",
        ),
        Integration(
            id="aws-1",
            name="AWS",
            type="aws",
            description="Amazon Web Services integration",
        ),
        Integration(
            id="stripe-1",
            name="Stripe",
            type="stripe",
            description="Payment processing and subscription management",
        ),
    ]


def default_templates() -> list[Template]:
    """Built-in template catalog."""
    return [
        Template(
            id="email-automation-1",
            name="Email Marketing Automation",
            description="Automated email sequences for lead nurturing",
            category="Marketing",
            triggers=["webhook", "schedule"],
            actions=["email", "crm_update"],
            price=99,
        ),
        Template(
            id="social-media-1",
            name="Social Media Cross-posting",
            description="Post content across multiple social platforms",
            category="Social Media",
            triggers=["manual", "schedule"],
            actions=["twitter_post", "linkedin_post", "facebook_post"],
            price=149,
        ),
    ]


class InMemoryStore:
    """Process-local collections of records.

    Lookups are linear scans. All access happens on the event loop thread,
    so single assignments and appends need no locking.
    """

    def __init__(self, seed: bool = True) -> None:
        """Initialize store.

        Args:
            seed: Load the built-in integration and template catalogs
        """
        self.users: list[User] = []
        self.workflows: list[Workflow] = []
        self.executions: list[Execution] = []
        self.integrations: list[Integration] = default_integrations() if seed else []
        self.templates: list[Template] = default_templates() if seed else []

    def find_user_by_email(self, email: str) -> User | None:
        # Addresses match case-insensitively; EmailStr only lowercases the domain
        wanted = email.strip().casefold()
        return next((u for u in self.users if u.email.casefold() == wanted), None)

    def find_user(self, user_id: str) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def find_workflow(self, workflow_id: str) -> Workflow | None:
        return next((w for w in self.workflows if w.id == workflow_id), None)

    def find_execution(self, execution_id: str) -> Execution | None:
        return next((e for e in self.executions if e.id == execution_id), None)

    def find_integration(self, integration_id: str) -> Integration | None:
        return next((i for i in self.integrations if i.id == integration_id), None)

    def find_template(self, template_id: str) -> Template | None:
        return next((t for t in self.templates if t.id == template_id), None)


@lru_cache
def get_store() -> InMemoryStore:
    """Get the process-wide store.

    Override this dependency in tests to get an isolated store.
    """
    store = InMemoryStore()
    logger.info(
        "store_initialized",
        integrations=len(store.integrations),
        templates=len(store.templates),
    )
    return store
