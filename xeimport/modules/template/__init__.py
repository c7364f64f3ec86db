"""
Template Module - Black Box Interface

Purpose: Turn requested templates into validated session documents
Interface: TemplateResolver.resolve(), TemplateDocument.load(),
           TemplateDocument.rewrite_target_paths()
Hidden: Catalog layout, XML parsing, path rewriting rules

The catalog root is injected; any directory of <identifier>.xml files works.
"""

from .document import ROOT_ELEMENT, XE_NAMESPACE, TemplateDocument
from .resolver import SourceKind, TemplateResolver, TemplateSource

__all__ = [
    "ROOT_ELEMENT",
    "XE_NAMESPACE",
    "SourceKind",
    "TemplateDocument",
    "TemplateResolver",
    "TemplateSource",
]
