"""Abstract interface for the two-bucket object store."""

from abc import ABC, abstractmethod
from pathlib import Path


class ObjectGateway(ABC):
    """Abstract base class for raw/processed object storage backends."""

    @abstractmethod
    async def fetch(self, object_name: str, destination: Path) -> None:
        """
        Downloads an object from the raw bucket into a local file.

        Args:
            object_name: The object key in the raw bucket.
            destination: Local path the object is written to.

        Raises:
            RemoteFetchError: If the object is missing or the transfer fails.
        """

    @abstractmethod
    async def publish(self, source: Path, object_name: str) -> None:
        """
        Uploads a local file to the processed bucket and makes it public.

        Upload and visibility change are two sequential, non-transactional
        steps.

        Args:
            source: Local path of the processed file.
            object_name: The destination key in the processed bucket.

        Raises:
            RemotePublishError: If either the upload or the visibility step fails.
        """

    @abstractmethod
    def ensure_buckets(self) -> None:
        """Ensures both the raw and the processed bucket exist."""
