"""
Store Module - Black Box Interface

Purpose: Describe the host database's Extended Events management API
Interface: Connector.connect(), SessionStore.session_exists(),
           SessionStore.create_session_from_template(), Session.create(),
           SessionStore.get_session(), load_connector()
Hidden: Vendor client, connection handling, DDL generation

Any host database client that satisfies these protocols can be plugged in.
"""

from .interfaces import (
    Connector,
    Credential,
    Session,
    SessionDescriptor,
    SessionStore,
    TemplateInput,
)
from .loader import load_connector

__all__ = [
    "Connector",
    "Credential",
    "Session",
    "SessionDescriptor",
    "SessionStore",
    "TemplateInput",
    "load_connector",
]
