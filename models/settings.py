"""
HashingSettings model, the validated run configuration shared by all CLI commands.
"""
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from models.algorithm import Algorithm, Mode, DEFAULT_ALGORITHM

DEFAULT_CHUNK_SIZE = 1_048_576


class HashingSettings(BaseModel):
    """
    Defaults applied to hash and check runs unless overridden on the command line.

    Attributes:
        algorithm (Algorithm): Algorithm for hashing, and for listing entries without a tag.
        mode (Mode): Text or binary marker in hash output.
        prefix (bool): Prepend the algorithm name to hash output lines.
        chunk_size (int): Bytes read per streaming update.
        max_workers (Optional[int]): Thread pool size; None uses the executor default.
    """

    model_config = ConfigDict(validate_assignment=True, extra='forbid')

    algorithm: Algorithm = Field(DEFAULT_ALGORITHM, description="Default digest algorithm")
    mode: Mode = Field(Mode.TEXT, description="Default output mode")
    prefix: bool = Field(False, description="Prefix output lines with the algorithm name")
    chunk_size: int = Field(DEFAULT_CHUNK_SIZE, gt=0, description="Read chunk size in bytes")
    max_workers: Optional[int] = Field(None, ge=1, description="Worker thread count")
