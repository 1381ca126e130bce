"""
HashingService: streaming file hashing for every registered algorithm.

Defaults to a 1 MiB chunk size for large file efficiency.
"""

from __future__ import annotations

import logging
from typing import Callable
from models.algorithm import Algorithm
from models.settings import DEFAULT_CHUNK_SIZE
from services.digest_factory import create_hasher
from utils.exceptions import DigestIOError

logger = logging.getLogger(__name__)


class HashingService:
    """
    Provides streaming hashing operations for large files.

    - Output is always a lowercase hex string
    - Output width is twice the algorithm's native digest size
    - Holds no per-file state, so one instance can be shared across worker threads
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def calculate(self, file_path: str, algorithm: Algorithm) -> str:
        """
        Hash a file with the given algorithm.

        Args:
            file_path (str): File to read.
            algorithm (Algorithm): Digest algorithm.

        Returns:
            str: Lowercase hex digest.

        Raises:
            DigestIOError: If the file cannot be opened or read. A directory path
                raises with is_directory set.
        """
        hasher = create_hasher(algorithm)
        try:
            with open(file_path, "rb") as f:
                while True:
                    data = f.read(self.chunk_size)
                    if not data:
                        break
                    hasher.update(data)
        except OSError as e:
            raise DigestIOError.from_os_error(file_path, e) from e
        digest = hasher.hexdigest()
        logger.debug(f"{algorithm.value} {file_path}: {digest}")
        return digest

    def hasher_for(self, algorithm: Algorithm) -> Callable[[str], str]:
        """
        Bind an algorithm, returning a path -> hex digest function.

        Args:
            algorithm (Algorithm): Digest algorithm.

        Returns:
            Callable[[str], str]: Function hashing one file per call.
        """
        def _hash(file_path: str) -> str:
            return self.calculate(file_path, algorithm)
        return _hash
