"""
Rendering of hash and verify results into checksum-tool compatible text lines.
"""
import os
import sys
import logging
from typing import List, Optional, Sequence, TextIO
from models.algorithm import Algorithm, Mode
from models.hash_result import HashResult, VerifyResult

logger = logging.getLogger(__name__)


def format_hash_results(results: Sequence[HashResult], algorithm: Algorithm, mode: Mode = Mode.TEXT, prefix: bool = False) -> List[str]:
    """
    Render hash results as `[<algorithm> ]<digest> <mode-char><path>` lines.

    Args:
        results (Sequence[HashResult]): Results in the order they should be printed.
        algorithm (Algorithm): Algorithm used, printed first when prefix is set.
        mode (Mode): Text prints ' ' before the path, binary prints '*'.
        prefix (bool): Prepend the algorithm name to each line.

    Returns:
        List[str]: Lines without trailing newlines.
    """
    lead = f"{algorithm.value} " if prefix else ""
    return [f"{lead}{r.digest} {mode.marker}{r.path}" for r in results]


def format_verify_results(results: Sequence[VerifyResult]) -> List[str]:
    """
    Render verify results as `<path padded to widest path> <OK|ERR>` lines.

    Args:
        results (Sequence[VerifyResult]): Results in the order they should be printed.

    Returns:
        List[str]: Lines without trailing newlines.
    """
    width = max((len(r.path) for r in results), default=0)
    return [f"{r.path.ljust(width)} {r.status}" for r in results]


def write_lines(lines: Sequence[str], stream: Optional[TextIO] = None) -> None:
    """
    Write each line with a trailing newline, then flush once.

    Streams with a binary buffer receive the lines encoded with os.fsencode, so paths
    that were not valid in the filesystem encoding are written back as their original bytes.

    Args:
        lines (Sequence[str]): Lines to write.
        stream (Optional[TextIO]): Output stream, stdout by default.
    """
    if stream is None:
        stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        for line in lines:
            stream.write(f"{line}\n")
        stream.flush()
    else:
        # Drain pending text before writing bytes underneath it
        stream.flush()
        for line in lines:
            buffer.write(os.fsencode(f"{line}\n"))
        buffer.flush()
    logger.debug(f"Wrote {len(lines)} lines")
