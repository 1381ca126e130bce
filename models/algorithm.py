"""
Algorithm and Mode enumerations for polysum.
"""
from enum import Enum
from typing import List
from utils.exceptions import UnknownAlgorithmError


class Algorithm(str, Enum):
    """
    Supported digest algorithms, identified by their lowercase-hyphenated name.

    Listed common and strong first, rarer and weaker later.
    """
    BLAKE3 = "blake3"
    BLAKE2S = "blake2s"
    BLAKE2B = "blake2b"
    SHA3_512 = "sha3-512"
    SHA3_384 = "sha3-384"
    SHA3_256 = "sha3-256"
    SHA3_224 = "sha3-224"
    SHA2_512 = "sha2-512"
    SHA2_384 = "sha2-384"
    SHA2_256 = "sha2-256"
    SHA2_224 = "sha2-224"
    SHA1 = "sha1"
    MD5 = "md5"
    GOST94 = "gost94"
    MD4 = "md4"
    MD2 = "md2"
    RIPEMD160 = "ripemd160"
    SM3 = "sm3"
    STREEBOG_512 = "streebog-512"
    STREEBOG_256 = "streebog-256"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def resolve(cls, name: str) -> "Algorithm":
        """
        Look up an algorithm by its canonical name.

        Args:
            name (str): Case-sensitive, hyphenated lowercase name (e.g. "sha2-256").

        Returns:
            Algorithm: The matching variant.

        Raises:
            UnknownAlgorithmError: If no variant has that name.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownAlgorithmError(name) from None

    @classmethod
    def names(cls) -> List[str]:
        return [algorithm.value for algorithm in cls]


DEFAULT_ALGORITHM = Algorithm.BLAKE3


class Mode(str, Enum):
    """Text or binary mode. Only changes the character printed before the path."""
    TEXT = "text"
    BINARY = "binary"

    def __str__(self) -> str:
        return self.value

    @property
    def marker(self) -> str:
        return "*" if self is Mode.BINARY else " "

    @classmethod
    def names(cls) -> List[str]:
        return [mode.value for mode in cls]
