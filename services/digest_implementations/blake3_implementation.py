import logging
from blake3 import blake3
from services.digest_implementations.digest_interface import StreamingHasher

logger = logging.getLogger(__name__)

# Default BLAKE3 output length in bytes
BLAKE3_DIGEST_SIZE = 32


class Blake3Hasher(StreamingHasher):
    """StreamingHasher backed by the blake3 package, producing the default 256-bit output."""

    def __init__(self):
        self._hash = blake3()

    @property
    def digest_size(self) -> int:
        return BLAKE3_DIGEST_SIZE

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def hexdigest(self) -> str:
        return self._hash.hexdigest()
