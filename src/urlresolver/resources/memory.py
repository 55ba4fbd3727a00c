from typing import Dict, Optional

from .base import ResourceReader


class DictResourceReader(ResourceReader):
    """Reader for resources held in memory, keyed by logical path."""

    def __init__(self, resources: Optional[Dict[str, str]] = None):
        self.resources = dict(resources or {})

    def read(self, logical_path: str) -> str:
        if logical_path not in self.resources:
            raise FileNotFoundError(f"Resource not found: {logical_path}")
        return self.resources[logical_path]

    def exists(self, logical_path: str) -> bool:
        return logical_path in self.resources
