import logging
import os

from .base import ResourceReader

logger = logging.getLogger(__name__)


class FileResourceReader(ResourceReader):
    """Reader for resources stored under an asset directory."""

    def __init__(self, root: str):
        """
        Initialize the file resource reader.

        Args:
            root: Asset directory that logical paths are relative to
        """
        self.root = os.path.abspath(root)

    def read(self, logical_path: str) -> str:
        """Read a text resource from the asset directory."""
        path = self._full_path(logical_path)

        if not os.path.isfile(path):
            raise FileNotFoundError(f"Resource not found: {logical_path}")

        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def exists(self, logical_path: str) -> bool:
        try:
            return os.path.isfile(self._full_path(logical_path))
        except ValueError:
            return False

    def _full_path(self, logical_path: str) -> str:
        """
        Map a logical path to a file path under the root.

        Raises:
            ValueError: If the path is absolute or escapes the root
        """
        if not logical_path:
            raise ValueError("Resource path cannot be empty")
        if os.path.isabs(logical_path):
            raise ValueError(f"Resource path must be relative: {logical_path}")

        path = os.path.abspath(os.path.join(self.root, logical_path))
        if os.path.commonpath([self.root, path]) != self.root:
            raise ValueError(f"Resource path escapes asset root: {logical_path}")
        return path
