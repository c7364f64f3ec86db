import logging
from typing import Optional

from ..errors import InvalidTemplateError, TemplateLoadError, UnknownTemplateError
from ..store import SessionDescriptor, SessionStore
from ..template import SourceKind, TemplateDocument, TemplateResolver
from .models import (
    INVALID_TEMPLATE,
    LOAD_ERROR,
    UNKNOWN_TEMPLATE,
    ProvisioningOutcome,
)

logger = logging.getLogger("xeimport.provisioning")


class ProvisioningEngine:
    """
    Provisions one template on one server at a time.

    Every failure is turned into a ProvisioningOutcome so callers can keep
    going with the remaining (server, template) pairs.
    """

    def __init__(
        self,
        resolver: TemplateResolver,
        target_file_path: Optional[str] = None,
        target_file_metadata_path: Optional[str] = None,
    ):
        """
        Initialize provisioning engine.

        Args:
            resolver: Resolves file paths and catalog identifiers
            target_file_path: Optional directory for event_file targets
            target_file_metadata_path: Optional directory for event_file metadata
        """
        self.resolver = resolver
        self.target_file_path = target_file_path
        self.target_file_metadata_path = target_file_metadata_path

    def provision(
        self,
        server: str,
        store: SessionStore,
        identifier: str,
        kind: SourceKind,
        explicit_name: Optional[str] = None,
    ) -> ProvisioningOutcome:
        """
        Create one session from one template.

        Args:
            server: Server name, used for reporting
            store: Session store of the connected server
            identifier: File path or catalog identifier as requested
            kind: Which of the two the identifier is
            explicit_name: Session name; derived from the template when None

        Returns:
            ProvisioningOutcome (created, skipped_existing or failed)

        Logic:
        1. Resolve the template source
        2. Load and validate the document
        3. Rewrite event_file target paths if requested
        4. Resolve the session name and check for a collision
        5. Delegate creation to the store
        6. Fetch the created session's descriptor
        """
        try:
            source = self.resolver.resolve(identifier, kind)
        except UnknownTemplateError as e:
            logger.debug(str(e))
            return ProvisioningOutcome.failed(
                server, UNKNOWN_TEMPLATE, target=identifier, source=identifier, detail=str(e)
            )

        try:
            document = TemplateDocument.load(source.path)
        except TemplateLoadError as e:
            return ProvisioningOutcome.failed(
                server, LOAD_ERROR, target=str(source.path), source=identifier, detail=e.details
            )
        except InvalidTemplateError as e:
            return ProvisioningOutcome.failed(
                server, INVALID_TEMPLATE, target=str(source.path), source=identifier, detail=e.details
            )
        logger.debug(f"Loaded {source.path} declaring sessions {document.session_names()}")

        if self.target_file_path or self.target_file_metadata_path:
            count = document.rewrite_target_paths(
                self.target_file_path, self.target_file_metadata_path
            )
            logger.debug(f"Rewrote {count} target path(s) in {source.path}")

        name = explicit_name or source.derived_name

        try:
            exists = store.session_exists(name)
        except Exception as e:
            logger.error(f"Failed to check for session '{name}' on {server}: {e}")
            return ProvisioningOutcome.failed(
                server, str(e) or type(e).__name__, target=server, source=identifier, name=name
            )

        if exists:
            return ProvisioningOutcome.skipped_existing(server, identifier, name)

        logger.info(f"Importing {identifier} as '{name}' on {server}")
        try:
            session = store.create_session_from_template(name, document.to_template_input())
            session.create()
        except Exception as e:
            # Creation may be partially applied on the server, never retry
            logger.error(f"Failed to create session '{name}' on {server}: {e}")
            return ProvisioningOutcome.failed(
                server, str(e) or type(e).__name__, target=server, source=identifier, name=name
            )

        return ProvisioningOutcome.created(server, identifier, self._describe(server, store, name))

    def _describe(self, server: str, store: SessionStore, name: str) -> SessionDescriptor:
        """Fetch the created session; the session exists even if this lookup fails."""
        try:
            return store.get_session(name)
        except Exception as e:
            logger.warning(f"Created session '{name}' on {server} but could not read it back: {e}")
            return SessionDescriptor(server=server, name=name)
