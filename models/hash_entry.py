"""
HashEntry and HashFile models, representing a parsed checksum listing.
"""
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict
from models.algorithm import Algorithm, Mode


class HashEntry(BaseModel):
    """
    One line of a checksum listing.

    Attributes:
        algorithm (Optional[Algorithm]): Explicit algorithm tag, or None to inherit one.
        hash (str): Recorded digest, stored verbatim.
        mode (Mode): Binary when the path was written with a leading '*'.
        file (str): Path of the file the digest refers to, without the mode marker.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    algorithm: Optional[Algorithm] = Field(None, description="Explicit algorithm tag")
    hash: str = Field(..., min_length=1, description="Recorded hex digest")
    mode: Mode = Field(Mode.TEXT, description="Text or binary mode")
    file: str = Field(..., min_length=1, description="Path of the referenced file")


class HashFile(BaseModel):
    """
    A parsed checksum listing.

    The listing format has no header, so algorithm is always None after parsing.
    It is kept so a file-level default can sit between the per-entry tag and the
    run-wide default.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    algorithm: Optional[Algorithm] = Field(None, description="File-level default algorithm")
    entries: List[HashEntry] = Field(default_factory=list, description="Entries in listing order")
