"""
SM3 hasher backed by gmssl.
"""
import logging
from gmssl import func, sm3
from services.digest_implementations.digest_interface import StreamingHasher

logger = logging.getLogger(__name__)

SM3_DIGEST_SIZE = 32


class Sm3Hasher(StreamingHasher):
    """
    StreamingHasher for SM3.

    gmssl only hashes a complete message, so updates are buffered in memory and
    hashed once in hexdigest().
    """

    def __init__(self):
        self._buffer = bytearray()

    @property
    def digest_size(self) -> int:
        return SM3_DIGEST_SIZE

    def update(self, data: bytes) -> None:
        self._buffer.extend(data)

    def hexdigest(self) -> str:
        return sm3.sm3_hash(func.bytes_to_list(bytes(self._buffer))).lower()
