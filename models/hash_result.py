"""
Result records produced by the digest pipeline and consumed by the output formatter.
"""
from pydantic import BaseModel, Field, ConfigDict


class HashResult(BaseModel):
    """Digest computed for one file in hash mode."""

    model_config = ConfigDict(frozen=True)

    digest: str = Field(..., description="Lowercase hex digest")
    path: str = Field(..., description="Path as given on the command line")


class VerifyResult(BaseModel):
    """Outcome of checking one listing entry in verify mode."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path from the listing entry")
    matched: bool = Field(..., description="True when the computed digest equals the recorded one")

    @property
    def status(self) -> str:
        return "OK" if self.matched else "ERR"
