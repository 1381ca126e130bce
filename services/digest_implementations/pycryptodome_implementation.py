import logging
from types import ModuleType
from services.digest_implementations.digest_interface import StreamingHasher

logger = logging.getLogger(__name__)


class PycryptodomeHasher(StreamingHasher):
    """
    StreamingHasher backed by a pycryptodome hash module (MD4, MD2, RIPEMD-160).

    Attributes:
        name (str): Module name, e.g. "MD4".
    """

    def __init__(self, module: ModuleType):
        self._hash = module.new()
        self.name = module.__name__.rsplit(".", 1)[-1]

    @property
    def digest_size(self) -> int:
        return self._hash.digest_size

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def hexdigest(self) -> str:
        return self._hash.hexdigest()
