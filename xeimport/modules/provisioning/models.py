"""
Provisioning outcome models.

One outcome is emitted per (server, template) pair, and one per server when
the connection itself fails.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..store import SessionDescriptor

# Failure reasons


LOAD_ERROR = "load error"
INVALID_TEMPLATE = "invalid template document"
UNKNOWN_TEMPLATE = "unknown template"
SESSION_EXISTS = "session already exists"
CONNECTION_FAILED = "connection failed"


class OutcomeStatus(str, Enum):
    """Result of one provisioning attempt."""

    CREATED = "created"
    SKIPPED_EXISTING = "skipped_existing"
    FAILED = "failed"


class ProvisioningOutcome(BaseModel):
    """Outcome of provisioning one template on one server."""

    status: OutcomeStatus
    server: str
    source: Optional[str] = Field(None, description="Template as requested (path or catalog identifier)")
    name: Optional[str] = Field(None, description="Resolved session name")
    reason: Optional[str] = None
    target: Optional[str] = Field(None, description="What the failure applies to")
    detail: Optional[str] = Field(None, description="Underlying error message")
    session: Optional[SessionDescriptor] = None

    @property
    def is_failure(self) -> bool:
        """Skipped sessions count as failures: the requested session was not created."""
        return self.status != OutcomeStatus.CREATED

    @classmethod
    def created(cls, server: str, source: str, session: SessionDescriptor) -> "ProvisioningOutcome":
        return cls(
            status=OutcomeStatus.CREATED,
            server=server,
            source=source,
            name=session.name,
            session=session,
        )

    @classmethod
    def skipped_existing(cls, server: str, source: str, name: str) -> "ProvisioningOutcome":
        return cls(
            status=OutcomeStatus.SKIPPED_EXISTING,
            server=server,
            source=source,
            name=name,
            reason=SESSION_EXISTS,
            target=server,
        )

    @classmethod
    def failed(
        cls,
        server: str,
        reason: str,
        target: str,
        source: Optional[str] = None,
        name: Optional[str] = None,
        detail: Optional[str] = None,
    ) -> "ProvisioningOutcome":
        return cls(
            status=OutcomeStatus.FAILED,
            server=server,
            source=source,
            name=name,
            reason=reason,
            target=target,
            detail=detail,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return self.model_dump(mode="json", exclude_none=True)

    def describe(self) -> str:
        """One-line summary used for warnings."""
        if self.status == OutcomeStatus.CREATED:
            return f"Created session '{self.name}' on {self.server}"
        if self.status == OutcomeStatus.SKIPPED_EXISTING:
            return f"Session '{self.name}' already exists on {self.server}, skipping {self.source}"
        message = f"{self.reason} for {self.target} on {self.server}"
        return f"{message}: {self.detail}" if self.detail else message
