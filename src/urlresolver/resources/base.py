from abc import ABC, abstractmethod


class ResourceReader(ABC):
    """Abstract base class for resource readers."""

    @abstractmethod
    def read(self, logical_path: str) -> str:
        """
        Read a resource as text.

        Args:
            logical_path: Path of the resource, relative to the reader's root

        Returns:
            Resource content as string

        Raises:
            FileNotFoundError: If the resource does not exist
            OSError: If the resource cannot be read
        """
        pass

    @abstractmethod
    def exists(self, logical_path: str) -> bool:
        """
        Check if a resource exists.

        Args:
            logical_path: Path of the resource, relative to the reader's root

        Returns:
            True if the resource exists, False otherwise
        """
        pass
