"""
Template source resolution.

A template is requested either as a file path or as an identifier from the
curated catalog. Both forms resolve to a TemplateSource carrying the file to
read and the session name to use when the caller gives none.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

from ..errors import UnknownTemplateError

logger = logging.getLogger("xeimport.template")

DEFAULT_EXTENSION = ".xml"


class SourceKind(str, Enum):
    """How a template was requested."""

    FILE = "file"
    CATALOG = "catalog"


@dataclass(frozen=True)
class TemplateSource:
    """A requested template resolved to a readable location."""

    kind: SourceKind
    identifier: str
    path: Path
    derived_name: str


class TemplateResolver:
    """Resolves file paths and catalog identifiers to template sources."""

    def __init__(self, catalog_root: Union[str, Path], extension: str = DEFAULT_EXTENSION):
        """
        Initialize resolver.

        Args:
            catalog_root: Directory holding <identifier><extension> files
            extension: Catalog file extension (default: .xml)
        """
        self._catalog_root = Path(catalog_root)
        self._extension = extension if extension.startswith(".") else f".{extension}"

    @property
    def catalog_root(self) -> Path:
        return self._catalog_root

    def resolve(self, identifier: str, kind: SourceKind) -> TemplateSource:
        """
        Resolve a requested template.

        Raises:
            UnknownTemplateError: For a catalog identifier with no file in the catalog
        """
        if kind == SourceKind.CATALOG:
            return self.resolve_catalog(identifier)
        return self.resolve_file(identifier)

    def resolve_catalog(self, identifier: str) -> TemplateSource:
        path = self._catalog_root / f"{identifier}{self._extension}"
        if not self._within_catalog(identifier, path) or not path.is_file():
            raise UnknownTemplateError(identifier, path)
        return TemplateSource(
            kind=SourceKind.CATALOG,
            identifier=identifier,
            path=path,
            derived_name=identifier,
        )

    def _within_catalog(self, identifier: str, path: Path) -> bool:
        """Catalog identifiers are bare names of files under the catalog root."""
        if not identifier or "/" in identifier or "\\" in identifier:
            return False
        if Path(identifier).is_absolute():
            return False
        return path.resolve().is_relative_to(self._catalog_root.resolve())

    def resolve_file(self, identifier: str) -> TemplateSource:
        # Existence is checked when the file is loaded, so a missing file
        # surfaces as a load error rather than an unknown template.
        path = Path(identifier)
        return TemplateSource(
            kind=SourceKind.FILE,
            identifier=identifier,
            path=path,
            derived_name=path.stem,
        )
