"""
Catalog document parser module for the URL resolution system.

Catalogs and strategy configuration files are JSON documents that may carry
JavaScript-style comments, or YAML documents. Both are parsed into a plain
dictionary.
"""

import json
import logging
import os
import re
from typing import Dict, Any, Optional

import yaml

logger = logging.getLogger(__name__)

# String literals are matched first so comment markers inside them survive
_COMMENT_PATTERN = re.compile(
    r'("(?:\\.|[^"\\])*")'
    r'|(/\*.*?\*/)'
    r'|(//[^\r\n]*)'
    r'|(^[ \t]*#[^\r\n]*)',
    re.DOTALL | re.MULTILINE
)

YAML_EXTENSIONS = ('.yaml', '.yml')


def strip_comments(text: str) -> str:
    """
    Remove comments from a JSON document.

    Handles ``// line`` comments, ``/* block */`` comments and lines starting
    with ``#``. String literals are left untouched, so URLs such as
    ``"http://example.com"`` keep their slashes.

    Args:
        text: Raw document text

    Returns:
        Text without comments
    """
    def _replace(match):
        if match.group(1) is not None:
            return match.group(1)
        if match.group(2) is not None:
            return " "
        return ""

    return _COMMENT_PATTERN.sub(_replace, text)


class CatalogParser:
    """Parser for catalog and strategy configuration documents."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the parser.

        Args:
            config: Parser configuration
        """
        self.config = config or {}
        self.strip_comments = self.config.get("strip_comments", True)

    def parse(self, text: str, source: Optional[str] = None) -> Dict[str, Any]:
        """
        Parse document text into a dictionary.

        Args:
            text: Raw document text
            source: Logical path of the document; its extension selects the format

        Returns:
            Parsed document

        Raises:
            ValueError: If the document is malformed or is not a mapping
        """
        if self._is_yaml(source):
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise ValueError(f"Error parsing YAML document {source}: {str(e)}") from e
        else:
            if self.strip_comments:
                text = strip_comments(text)
            try:
                data = json.loads(text)
            except json.JSONDecodeError as e:
                raise ValueError(f"Error parsing JSON document {source}: {str(e)}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Document {source} must contain a mapping, got {type(data).__name__}")

        return data

    @staticmethod
    def _is_yaml(source: Optional[str]) -> bool:
        if not source:
            return False
        return os.path.splitext(source)[1].lower() in YAML_EXTENSIONS
