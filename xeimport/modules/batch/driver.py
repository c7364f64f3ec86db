import logging
from typing import Iterator, List, Optional

from pydantic import BaseModel, Field

from ..errors import RequestConflictError
from ..provisioning import CONNECTION_FAILED, ProvisioningEngine, ProvisioningOutcome
from ..store import Connector, Credential
from ..template import SourceKind, TemplateResolver

logger = logging.getLogger("xeimport.batch")


class ImportRequest(BaseModel):
    """Request to import templates onto one or more servers."""

    servers: List[str] = Field(..., description="Target servers, visited in order", min_length=1)
    credential: Optional[Credential] = None
    name: Optional[str] = Field(None, description="Explicit session name (single template only)")
    paths: List[str] = Field(default_factory=list, description="Template file paths")
    templates: List[str] = Field(default_factory=list, description="Catalog identifiers")
    target_file_path: Optional[str] = None
    target_file_metadata_path: Optional[str] = None
    enable_exception: bool = Field(
        default=False,
        description="Return failures as outcomes/raise conflicts instead of logging warnings",
    )

    @property
    def kind(self) -> SourceKind:
        return SourceKind.FILE if self.paths else SourceKind.CATALOG

    @property
    def sources(self) -> List[str]:
        return self.paths or self.templates


def validate_request(request: ImportRequest) -> None:
    """
    Reject ambiguous request shapes.

    Raises:
        RequestConflictError: No source, both source kinds, or an explicit
            name combined with more than one source
    """
    if not request.paths and not request.templates:
        raise RequestConflictError("must specify a source: one or more paths or templates")
    if request.paths and request.templates:
        raise RequestConflictError("specify either paths or templates, not both")
    if request.name and len(request.sources) > 1:
        raise RequestConflictError(
            "name ambiguous across multiple sources: "
            "Name cannot be specified with multiple paths or templates"
        )


class BatchDriver:
    """Fans an import request out over servers and templates."""

    def __init__(self, connector: Connector, resolver: TemplateResolver):
        """
        Initialize batch driver.

        Args:
            connector: Connects to servers
            resolver: Template resolver handed to the provisioning engine
        """
        self.connector = connector
        self.resolver = resolver

    def iter_outcomes(self, request: ImportRequest) -> Iterator[ProvisioningOutcome]:
        """
        Yield every outcome, failures included.

        The request is validated before the first server is contacted.
        """
        validate_request(request)

        engine = ProvisioningEngine(
            self.resolver,
            target_file_path=request.target_file_path,
            target_file_metadata_path=request.target_file_metadata_path,
        )
        kind = request.kind

        for server in request.servers:
            try:
                store = self.connector.connect(server, request.credential)
            except Exception as e:
                logger.error(f"Failed to connect to {server}: {e}")
                yield ProvisioningOutcome.failed(
                    server, CONNECTION_FAILED, target=server, detail=str(e)
                )
                continue

            for identifier in request.sources:
                yield engine.provision(server, store, identifier, kind, request.name)

    def run(self, request: ImportRequest) -> List[ProvisioningOutcome]:
        """
        Run the import.

        With enable_exception set, every outcome is returned and request
        conflicts raise. Otherwise failures are logged as warnings and only
        created sessions are returned.
        """
        if request.enable_exception:
            return list(self.iter_outcomes(request))

        try:
            validate_request(request)
        except RequestConflictError as e:
            logger.warning(str(e))
            return []

        created = []
        for outcome in self.iter_outcomes(request):
            if outcome.is_failure:
                logger.warning(outcome.describe())
            else:
                created.append(outcome)
        return created
