"""Session store interfaces following Black Box Design principles."""
from pathlib import Path
from typing import List, Optional, Protocol, Union

from pydantic import BaseModel, Field, SecretStr


# A template is handed to the store either as the path of an unmodified
# file or as serialized XML bytes (after target path rewriting).
TemplateInput = Union[Path, bytes]


class Credential(BaseModel):
    """Login used by a connector. The core never inspects it."""

    username: str = Field(..., min_length=1)
    password: SecretStr = Field(default=SecretStr(""))


class SessionDescriptor(BaseModel):
    """Canonical description of a session as reported by the server."""

    server: str
    name: str
    status: str = "Stopped"
    start_up_state: bool = False
    events: List[str] = Field(default_factory=list)
    targets: List[str] = Field(default_factory=list)


class Session(Protocol):
    """A session object that has been built from a template but not yet created."""

    name: str

    def create(self) -> None:
        """Materialize the session on the server."""
        ...


class SessionStore(Protocol):
    """Protocol for the Extended Events store of one connected server."""

    def session_exists(self, name: str) -> bool:
        """Return True if a session with this name already exists."""
        ...

    def create_session_from_template(self, name: str, template: TemplateInput) -> Session:
        """
        Build a session object from a template.

        Args:
            name: Session name
            template: Template file path or serialized template bytes

        Returns:
            Session object; nothing is written until create() is called
        """
        ...

    def get_session(self, name: str) -> SessionDescriptor:
        """Fetch the canonical descriptor of an existing session."""
        ...


class Connector(Protocol):
    """Protocol for connectors - turns a server name into a live store."""

    def connect(self, server: str, credential: Optional[Credential] = None) -> SessionStore:
        """
        Connect to a server.

        Args:
            server: Server/instance identifier
            credential: Optional login

        Returns:
            SessionStore bound to the connection

        Raises:
            Any exception on failure; the batch driver records it per server
        """
        ...
