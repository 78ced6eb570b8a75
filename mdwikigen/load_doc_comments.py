"""Logic for loading the companion XML documentation file."""

import logging
from pathlib import Path

from defusedxml import DefusedXmlException, ElementTree

from mdwikigen.doc_comment import DocComment
from mdwikigen.parse_doc_comments import parse_doc_comments

logger = logging.getLogger(__name__)


def companion_xml_path(types_path: Path) -> Path:
    """Return the XML doc path that sits next to a types manifest (same stem)."""
    return types_path.with_suffix(".xml")


def load_doc_comments(path: Path, namespace_match: str | None = None) -> list[DocComment]:
    """Load doc comments from ``path``; a missing or unreadable file yields none."""
    if not path.exists():
        logger.info("No XML documentation found at %s", path)
        return []
    try:
        return parse_doc_comments(path.read_bytes(), namespace_match)
    except (ElementTree.ParseError, DefusedXmlException):
        logger.warning("Could not parse XML documentation %s", path, exc_info=True)
        return []
