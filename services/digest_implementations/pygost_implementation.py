"""
GOST R 34.11-94 and Streebog (GOST R 34.11-2012) hashers backed by pygost.
"""
import logging
from pygost.gost341194 import GOST341194
from pygost.gost34112012256 import GOST34112012256
from pygost.gost34112012512 import GOST34112012512
from services.digest_implementations.digest_interface import StreamingHasher

logger = logging.getLogger(__name__)

# S-box used by the checksum tools that list plain "gost94"
GOST94_SBOX = "id-GostR3411-94-TestParamSet"


class PygostHasher(StreamingHasher):
    """StreamingHasher wrapping a pygost hash object."""

    def __init__(self, hash_object, digest_size: int):
        self._hash = hash_object
        self._digest_size = digest_size

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def hexdigest(self) -> str:
        return self._hash.hexdigest()


def gost94_hasher() -> PygostHasher:
    return PygostHasher(GOST341194(sbox=GOST94_SBOX), 32)


def streebog512_hasher() -> PygostHasher:
    return PygostHasher(GOST34112012512(), 64)


def streebog256_hasher() -> PygostHasher:
    return PygostHasher(GOST34112012256(), 32)
