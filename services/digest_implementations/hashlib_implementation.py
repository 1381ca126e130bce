import logging
from typing import Any, Callable
from services.digest_implementations.digest_interface import StreamingHasher

logger = logging.getLogger(__name__)


class HashlibHasher(StreamingHasher):
    """
    StreamingHasher backed by a hashlib constructor (BLAKE2, SHA-2, SHA-3, SHA-1, MD5).

    Attributes:
        name (str): hashlib name of the underlying digest.
    """

    def __init__(self, constructor: Callable[[], Any]):
        self._hash = constructor()
        self.name = self._hash.name

    @property
    def digest_size(self) -> int:
        return self._hash.digest_size

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def hexdigest(self) -> str:
        return self._hash.hexdigest()
