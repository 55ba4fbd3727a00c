"""
URL catalog model.

A catalog is a parsed document with an ordered ``urls`` list, addressed by
0-based index.
"""
from typing import Dict, Any, List

from pydantic import BaseModel, Field

URLS = "urls"


class UrlCatalog(BaseModel):
    """Pydantic model for a parsed URL catalog."""
    urls: List[str] = Field(title="Ordered URLs, addressed by 0-based index.")

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "UrlCatalog":
        """
        Build a catalog from a parsed document.

        Args:
            data: Parsed catalog document

        Returns:
            UrlCatalog instance

        Raises:
            pydantic.ValidationError: If the ``urls`` field is missing or not a list of strings
        """
        return cls.model_validate({URLS: data.get(URLS)})

    def __len__(self) -> int:
        return len(self.urls)

    def get(self, index: int) -> str:
        """
        Get the URL at an index.

        Raises:
            IndexError: If index is not in ``0 <= index < len(urls)``
        """
        if not 0 <= index < len(self.urls):
            raise IndexError(f"Index {index} out of range for catalog of {len(self.urls)} urls")
        return self.urls[index]
