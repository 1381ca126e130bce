"""
This module maps each Algorithm to a factory producing a fresh StreamingHasher.

Algorithms are added by registration rather than by editing a central switch.
Every Algorithm variant is registered at import time.
"""
import hashlib
import logging
from functools import partial
from typing import Callable, Dict
from Crypto.Hash import MD2, MD4, RIPEMD160
from models.algorithm import Algorithm
from services.digest_implementations.digest_interface import StreamingHasher
from services.digest_implementations.hashlib_implementation import HashlibHasher
from services.digest_implementations.blake3_implementation import Blake3Hasher
from services.digest_implementations.gmssl_implementation import Sm3Hasher
from services.digest_implementations.pycryptodome_implementation import PycryptodomeHasher
from services.digest_implementations.pygost_implementation import (
    gost94_hasher,
    streebog256_hasher,
    streebog512_hasher,
)

logger = logging.getLogger(__name__)

HasherFactory = Callable[[], StreamingHasher]

_REGISTRY: Dict[Algorithm, HasherFactory] = {}


def register_hasher(algorithm: Algorithm, factory: HasherFactory) -> None:
    """
    Register the hasher factory for an algorithm, replacing any previous one.

    Args:
        algorithm (Algorithm): Algorithm to register.
        factory (HasherFactory): Zero-argument callable returning a new StreamingHasher.
    """
    if algorithm in _REGISTRY:
        logger.debug(f"Replacing hasher factory for {algorithm.value}")
    _REGISTRY[algorithm] = factory


def create_hasher(algorithm: Algorithm) -> StreamingHasher:
    """
    Create a new StreamingHasher for the given algorithm.

    Args:
        algorithm (Algorithm): Algorithm to hash with.

    Returns:
        StreamingHasher: A hasher with no data fed yet.

    Raises:
        KeyError: If no factory is registered for the algorithm.
    """
    try:
        factory = _REGISTRY[algorithm]
    except KeyError:
        raise KeyError(f"No hasher registered for algorithm: {algorithm}") from None
    return factory()


def registered_algorithms() -> list:
    """Return registered algorithms in Algorithm declaration order."""
    return [algorithm for algorithm in Algorithm if algorithm in _REGISTRY]


def digest_size(algorithm: Algorithm) -> int:
    """Native digest size of an algorithm in bytes."""
    return create_hasher(algorithm).digest_size


register_hasher(Algorithm.BLAKE3, Blake3Hasher)
register_hasher(Algorithm.BLAKE2S, partial(HashlibHasher, hashlib.blake2s))
register_hasher(Algorithm.BLAKE2B, partial(HashlibHasher, hashlib.blake2b))
register_hasher(Algorithm.SHA3_512, partial(HashlibHasher, hashlib.sha3_512))
register_hasher(Algorithm.SHA3_384, partial(HashlibHasher, hashlib.sha3_384))
register_hasher(Algorithm.SHA3_256, partial(HashlibHasher, hashlib.sha3_256))
register_hasher(Algorithm.SHA3_224, partial(HashlibHasher, hashlib.sha3_224))
register_hasher(Algorithm.SHA2_512, partial(HashlibHasher, hashlib.sha512))
register_hasher(Algorithm.SHA2_384, partial(HashlibHasher, hashlib.sha384))
register_hasher(Algorithm.SHA2_256, partial(HashlibHasher, hashlib.sha256))
register_hasher(Algorithm.SHA2_224, partial(HashlibHasher, hashlib.sha224))
register_hasher(Algorithm.SHA1, partial(HashlibHasher, hashlib.sha1))
register_hasher(Algorithm.MD5, partial(HashlibHasher, hashlib.md5))
register_hasher(Algorithm.GOST94, gost94_hasher)
register_hasher(Algorithm.MD4, partial(PycryptodomeHasher, MD4))
register_hasher(Algorithm.MD2, partial(PycryptodomeHasher, MD2))
register_hasher(Algorithm.RIPEMD160, partial(PycryptodomeHasher, RIPEMD160))
register_hasher(Algorithm.SM3, Sm3Hasher)
register_hasher(Algorithm.STREEBOG_512, streebog512_hasher)
register_hasher(Algorithm.STREEBOG_256, streebog256_hasher)
