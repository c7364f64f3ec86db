"""
In-memory stand-ins for the host database's Extended Events API.

FakeSessionStore behaves like a single server: sessions built from a template
only become visible once create() is called. FakeConnector hands out one
store per server and can be told to refuse some servers.

Usage:
    def test_import(fake_connector):
        fake_connector.store("sql01").add_existing("db_query_wait_stats")
        fake_connector.fail_connect("sql02", "login timeout")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple, Union

from xeimport.modules.store import Credential, SessionDescriptor

# Set by CLI tests so that `--connector fixtures.fake_store:active_connector`
# resolves to the connector under test.
ACTIVE_CONNECTOR = None


def active_connector():
    return ACTIVE_CONNECTOR


@dataclass
class FakeSession:
    """Session built from a template, not yet created."""

    store: "FakeSessionStore"
    name: str
    template: Union[Path, bytes]

    def create(self) -> None:
        self.store._create(self)


@dataclass
class FakeSessionStore:
    """Extended Events store of one fake server."""

    server: str
    sessions: Dict[str, SessionDescriptor] = field(default_factory=dict)
    templates: Dict[str, Union[Path, bytes]] = field(default_factory=dict)
    exists_calls: List[str] = field(default_factory=list)
    build_calls: List[Tuple[str, Union[Path, bytes]]] = field(default_factory=list)
    create_error: Optional[Exception] = None

    def add_existing(self, name: str) -> "FakeSessionStore":
        self.sessions[name] = SessionDescriptor(server=self.server, name=name, status="Running")
        return self

    def remove(self, name: str) -> None:
        self.sessions.pop(name, None)

    def session_exists(self, name: str) -> bool:
        self.exists_calls.append(name)
        return name in self.sessions

    def create_session_from_template(self, name: str, template: Union[Path, bytes]) -> FakeSession:
        self.build_calls.append((name, template))
        return FakeSession(store=self, name=name, template=template)

    def get_session(self, name: str) -> SessionDescriptor:
        return self.sessions[name]

    def _create(self, session: FakeSession) -> None:
        if self.create_error is not None:
            raise self.create_error
        if session.name in self.sessions:
            raise RuntimeError(f"Session '{session.name}' already exists")
        self.templates[session.name] = session.template
        self.sessions[session.name] = SessionDescriptor(
            server=self.server,
            name=session.name,
            status="Stopped",
            targets=["package0.event_file"],
        )


class FakeConnector:
    """Connector handing out one FakeSessionStore per server."""

    def __init__(self):
        self._stores: Dict[str, FakeSessionStore] = {}
        self._refused: Dict[str, str] = {}
        self.connect_calls: List[Tuple[str, Optional[Credential]]] = []
        self.closed: Set[str] = set()

    def store(self, server: str) -> FakeSessionStore:
        if server not in self._stores:
            self._stores[server] = FakeSessionStore(server=server)
        return self._stores[server]

    def fail_connect(self, server: str, message: str) -> "FakeConnector":
        self._refused[server] = message
        return self

    def connect(self, server: str, credential: Optional[Credential] = None) -> FakeSessionStore:
        self.connect_calls.append((server, credential))
        if server in self._refused:
            raise ConnectionError(self._refused[server])
        return self.store(server)
