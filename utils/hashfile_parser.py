"""
Parser for checksum listings in the `[<algorithm>] <digest> [*]<path>` line format.

Parsing is all-or-nothing: the first malformed line or unknown algorithm aborts the
whole listing.
"""
import re
import logging
from pathlib import Path
from typing import List, Optional, Union
from models.algorithm import Algorithm, Mode
from models.hash_entry import HashEntry, HashFile
from utils.exceptions import DigestIOError, HashFileFormatError

logger = logging.getLogger(__name__)

BINARY_MARKER = "*"

# Unicode White_Space only; the ASCII separators \x1c-\x1f are path characters
WHITESPACE = re.compile("[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+")


def tokenize(line: str) -> List[str]:
    """Split a line on Unicode whitespace, dropping empty tokens."""
    return [token for token in WHITESPACE.split(line) if token]


def parse_hash_entry(line: str, line_number: Optional[int] = None) -> HashEntry:
    """
    Parse one listing line into a HashEntry.

    Three or more whitespace-separated tokens are read as algorithm, digest and path;
    anything past the third token is ignored. Two tokens are read as digest and path
    with no algorithm. A leading '*' on the path selects binary mode and is stripped.

    Args:
        line (str): Raw line, with or without its trailing newline.
        line_number (Optional[int]): 1-based line number, used in error messages.

    Returns:
        HashEntry: The parsed entry.

    Raises:
        HashFileFormatError: If the line has fewer than two tokens.
        UnknownAlgorithmError: If the algorithm token is not a known algorithm.
    """
    parts = tokenize(line)
    if len(parts) < 2:
        raise HashFileFormatError("line too short", line_number)

    if len(parts) >= 3:
        algorithm = Algorithm.resolve(parts[0])
        digest, file = parts[1], parts[2]
    else:
        algorithm = None
        digest, file = parts[0], parts[1]

    if file.startswith(BINARY_MARKER):
        mode = Mode.BINARY
        file = file[len(BINARY_MARKER):]
    else:
        mode = Mode.TEXT

    if not file:
        raise HashFileFormatError("missing file path", line_number)

    return HashEntry(algorithm=algorithm, hash=digest, mode=mode, file=file)


def parse_hash_lines(lines: List[str]) -> HashFile:
    """
    Parse listing lines into a HashFile, skipping blank lines.

    Args:
        lines (List[str]): Lines of a listing, in order.

    Returns:
        HashFile: Parsed listing with no file-level algorithm.
    """
    entries = []
    for line_number, line in enumerate(lines, start=1):
        if not tokenize(line):
            continue
        entries.append(parse_hash_entry(line, line_number))
    return HashFile(algorithm=None, entries=entries)


def parse_hash_file(file: Union[str, Path]) -> HashFile:
    """
    Read and parse a whole checksum listing.

    Args:
        file (Union[str, Path]): Path of the listing.

    Returns:
        HashFile: Parsed listing.

    Raises:
        DigestIOError: If the listing cannot be read.
        HashFileFormatError: If any line is malformed.
        UnknownAlgorithmError: If any line names an unknown algorithm.
    """
    logger.info(f"Parsing hash listing: {file}")
    try:
        with open(file, "r", encoding="utf-8", newline="") as f:
            lines = f.read().split("\n")
    except OSError as e:
        raise DigestIOError.from_os_error(str(file), e) from e
    except UnicodeDecodeError as e:
        raise HashFileFormatError(f"{file} is not valid UTF-8: {e.reason}") from e

    hash_file = parse_hash_lines(lines)
    logger.info(f"Parsed {len(hash_file.entries)} entries from {file}")
    return hash_file
