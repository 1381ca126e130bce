import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class StreamingHasher(ABC):
    """
    Abstract base class defining the incremental hashing interface used by polysum.

    A hasher is created fresh for every file, fed the file contents chunk by chunk,
    and finalized once into a lowercase hex string.

    Methods:
        update(data): Feed the next chunk of bytes.
        hexdigest(): Return the final digest as lowercase hex.
        digest_size: Native digest size in bytes.
    """

    @property
    @abstractmethod
    def digest_size(self) -> int:
        """Native digest size in bytes."""
        pass

    @abstractmethod
    def update(self, data: bytes) -> None:
        """
        Feed bytes into the running digest.
        Args:
            data: Next chunk of file contents
        """
        pass

    @abstractmethod
    def hexdigest(self) -> str:
        """
        Finalize the digest.
        Returns:
            str: Lowercase hexadecimal digest, twice digest_size characters long
        """
        pass
