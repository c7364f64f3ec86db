"""
Shared pytest fixtures for xeimport tests.

This module provides common fixtures including:
- Template XML builders and on-disk template files
- A temporary template catalog
- Fake connector/store standing in for the host database API
"""

import os
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
# Allow `from fixtures...` imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fixtures.fake_store import FakeConnector

from xeimport.modules.template import TemplateResolver


# =============================================================================
# Template Builders
# =============================================================================

XE_NS = "http://schemas.microsoft.com/sqlserver/2008/07/extendedeventsconfig"


def session_template_xml(
    session_name: str = "template_session",
    filename: str = "template_session.xel",
    metadatafile: Optional[str] = None,
    namespaced: bool = True,
) -> str:
    """Build a minimal Extended Events template document."""
    xmlns = f' xmlns="{XE_NS}"' if namespaced else ""
    metadata = (
        f'\n      <parameter name="metadatafile" value="{metadatafile}" />' if metadatafile else ""
    )
    return f"""<?xml version="1.0" encoding="utf-8"?>
<event_sessions{xmlns}>
  <event_session name="{session_name}" maxMemory="4" eventRetentionMode="allowSingleEventLoss">
    <templateCategory>Testing</templateCategory>
    <templateName>{session_name}</templateName>
    <event package="sqlserver" name="sql_batch_completed">
      <action package="sqlserver" name="database_name" />
    </event>
    <target package="package0" name="event_file">
      <parameter name="filename" value="{filename}" />{metadata}
      <parameter name="max_file_size" value="50" />
    </target>
    <target package="package0" name="ring_buffer">
      <parameter name="max_memory" value="4096" />
    </target>
  </event_session>
</event_sessions>
"""


NOT_A_TEMPLATE_XML = """<?xml version="1.0" encoding="utf-8"?>
<configuration>
  <setting name="foo" value="bar" />
</configuration>
"""

MALFORMED_XML = "<event_sessions><event_session name='x'>"


# =============================================================================
# Template Files
# =============================================================================

@pytest.fixture
def write_template(tmp_path: Path) -> Callable[..., Path]:
    """
    Write a template file under tmp_path/templates_in and return its path.

    Usage:
        path = write_template("a.xml")                     # valid template
        path = write_template("b.xml", NOT_A_TEMPLATE_XML)  # invalid content
    """
    directory = tmp_path / "templates_in"
    directory.mkdir(exist_ok=True)

    def _write(filename: str, content: Optional[str] = None) -> Path:
        path = directory / filename
        path.write_text(content if content is not None else session_template_xml(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    """Temporary catalog with two valid templates and one broken one."""
    root = tmp_path / "catalog"
    root.mkdir()
    (root / "db_query_wait_stats.xml").write_text(
        session_template_xml("db_query_wait_stats", "db_query_wait_stats"), encoding="utf-8"
    )
    (root / "long_running_queries.xml").write_text(
        session_template_xml(
            "long_running_queries", "long_running_queries.xel", "long_running_queries.xem"
        ),
        encoding="utf-8",
    )
    (root / "broken.xml").write_text(NOT_A_TEMPLATE_XML, encoding="utf-8")
    return root


@pytest.fixture
def resolver(catalog_root: Path) -> TemplateResolver:
    """Resolver bound to the temporary catalog."""
    return TemplateResolver(catalog_root)


# =============================================================================
# Fake Host Database
# =============================================================================

@pytest.fixture
def fake_connector() -> FakeConnector:
    """Connector with an in-memory store per server."""
    return FakeConnector()


@pytest.fixture
def fake_store(fake_connector):
    """Store of server 'sql01'."""
    return fake_connector.store("sql01")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove xeimport environment variables for the duration of a test."""
    for name in (
        "XEIMPORT_CONFIG",
        "XEIMPORT_CATALOG_ROOT",
        "XEIMPORT_TEMPLATE_EXTENSION",
        "XEIMPORT_CONNECTOR",
        "XEIMPORT_ENABLE_EXCEPTION",
        "XEIMPORT_SQL_PASSWORD",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
