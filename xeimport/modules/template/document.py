"""
Template documents.

Templates are Extended Events session definitions exported as XML. Only the
root element is validated; the rest of the document is passed to the store
untouched unless event_file target paths are rewritten.
"""

import copy
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..errors import InvalidTemplateError, TemplateLoadError
from ..store import TemplateInput

logger = logging.getLogger("xeimport.template")

XE_NAMESPACE = "http://schemas.microsoft.com/sqlserver/2008/07/extendedeventsconfig"
ROOT_ELEMENT = "event_sessions"

_WINDOWS_DRIVE = re.compile(r"^[A-Za-z]:")


def _local_name(tag: str) -> str:
    """Strip the {namespace} prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _namespace(tag: str) -> str:
    return tag[1:].split("}", 1)[0] if isinstance(tag, str) and tag.startswith("{") else ""


def _join_target_path(directory: str, original: str) -> str:
    """Join a directory with the leaf name of an existing target file path."""
    leaf = re.split(r"[\\/]", original)[-1]
    windows = "\\" in directory or bool(_WINDOWS_DRIVE.match(directory))
    sep = "\\" if windows else "/"
    return directory.rstrip("\\/") + sep + leaf


@dataclass
class TemplateDocument:
    """Parsed template, owned by a single provisioning attempt."""

    path: Path
    root: ET.Element
    modified: bool = False

    @classmethod
    def load(cls, path: Path) -> "TemplateDocument":
        """
        Read and validate a template file.

        Raises:
            TemplateLoadError: The file cannot be read
            InvalidTemplateError: Not XML, or no event_sessions root
        """
        try:
            raw = Path(path).read_bytes()
        except (OSError, ValueError) as e:
            raise TemplateLoadError(path, str(e)) from e
        return cls.parse(raw, path)

    @classmethod
    def parse(cls, raw: bytes, path: Path) -> "TemplateDocument":
        try:
            root = ET.fromstring(raw)
        except ET.ParseError as e:
            raise InvalidTemplateError(path, f"not well-formed XML ({e})") from e

        if _local_name(root.tag) != ROOT_ELEMENT:
            raise InvalidTemplateError(
                path, f"root element is '{_local_name(root.tag)}', expected '{ROOT_ELEMENT}'"
            )
        return cls(path=Path(path), root=root)

    def session_names(self) -> List[str]:
        """Names declared by the event_session elements in the template."""
        return [
            el.get("name", "")
            for el in self.root.iter()
            if _local_name(el.tag) == "event_session"
        ]

    def rewrite_target_paths(
        self,
        file_path: Optional[str] = None,
        metadata_path: Optional[str] = None,
    ) -> int:
        """
        Point event_file targets at new directories.

        Args:
            file_path: Directory for the filename parameter
            metadata_path: Directory for the metadatafile parameter

        Returns:
            Number of parameters rewritten
        """
        replacements = {}
        if file_path:
            replacements["filename"] = file_path
        if metadata_path:
            replacements["metadatafile"] = metadata_path
        if not replacements:
            return 0

        rewritten = 0
        for target in self.root.iter():
            if _local_name(target.tag) != "target" or target.get("name") != "event_file":
                continue
            for param in target:
                if _local_name(param.tag) != "parameter":
                    continue
                directory = replacements.get(param.get("name"))
                if directory is None or param.get("value") is None:
                    continue
                new_value = _join_target_path(directory, param.get("value"))
                logger.debug(f"{self.path}: {param.get('name')} {param.get('value')} -> {new_value}")
                param.set("value", new_value)
                rewritten += 1

        if rewritten:
            self.modified = True
        return rewritten

    def to_bytes(self) -> bytes:
        """Serialize the document, writing the root namespace as a plain xmlns."""
        root = copy.deepcopy(self.root)
        namespace = _namespace(root.tag)
        if namespace:
            for el in root.iter():
                if _namespace(el.tag) == namespace:
                    el.tag = _local_name(el.tag)
            root.set("xmlns", namespace)
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)

    def to_template_input(self) -> TemplateInput:
        """What the store should build from: the file, or the rewritten XML."""
        return self.to_bytes() if self.modified else self.path
