"""
Parallel digest pipeline: hashes or verifies many files on a thread pool.

Every unit of work reads one path and shares nothing with the others. Results are
collected in submission order once all units have been scheduled; the first error
found during collection aborts the batch after the pool has drained.
"""
import os
import logging
import datetime
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional
from models.algorithm import Algorithm, DEFAULT_ALGORITHM
from models.hash_entry import HashEntry, HashFile
from models.hash_result import HashResult, VerifyResult
from services.hashing_service import HashingService
from utils.exceptions import DigestIOError

logger = logging.getLogger(__name__)


def resolve_algorithm(entry: HashEntry, hash_file: HashFile, default_algorithm: Optional[Algorithm] = None) -> Algorithm:
    """
    Pick the algorithm for a listing entry.

    The entry's own tag wins, then the listing's file-level default, then the run default,
    then DEFAULT_ALGORITHM.

    Args:
        entry (HashEntry): Listing entry.
        hash_file (HashFile): Listing the entry belongs to.
        default_algorithm (Optional[Algorithm]): Run-wide default.

    Returns:
        Algorithm: The effective algorithm.
    """
    return entry.algorithm or hash_file.algorithm or default_algorithm or DEFAULT_ALGORITHM


def sort_key(path: str) -> bytes:
    """Byte-wise ordering key for a path."""
    return os.fsencode(path)


def hash_files(
    paths: Iterable[str],
    algorithm: Algorithm,
    hashing_service: HashingService,
    max_workers: Optional[int] = None,
) -> List[HashResult]:
    """
    Hash every path concurrently and return results sorted by path.

    Directories are silently dropped. Any other read failure aborts the batch.

    Args:
        paths (Iterable[str]): Paths to hash.
        algorithm (Algorithm): Digest algorithm.
        hashing_service (HashingService): Service performing the streaming reads.
        max_workers (Optional[int]): Thread pool size; None uses the executor default.

    Returns:
        List[HashResult]: One result per regular file, in ascending byte-wise path order.

    Raises:
        DigestIOError: For the first non-directory failure in input order.
    """
    paths = [str(p) for p in paths]
    hasher = hashing_service.hasher_for(algorithm)
    logger.info(f"Hashing {len(paths)} paths with {algorithm.value}, max_workers={max_workers}")

    def hash_task(path: str) -> Optional[HashResult]:
        try:
            return HashResult(digest=hasher(path), path=path)
        except DigestIOError as e:
            if e.is_directory:
                logger.debug(f"Skipping directory: {path}")
                return None
            raise

    start_ts = datetime.datetime.now()
    results: List[HashResult] = []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(hash_task, path) for path in paths]
        for future in futures:
            result = future.result()
            if result is not None:
                results.append(result)

    results.sort(key=lambda r: sort_key(r.path))
    duration = (datetime.datetime.now() - start_ts).total_seconds()
    logger.info(f"Hashed {len(results)} files in {duration:.2f}s ({len(paths) - len(results)} directories skipped)")
    return results


def verify_hash_file(
    hash_file: HashFile,
    default_algorithm: Optional[Algorithm],
    hashing_service: HashingService,
    max_workers: Optional[int] = None,
) -> List[VerifyResult]:
    """
    Re-hash every file referenced by a listing and compare against the recorded digests.

    Comparison is exact; the recorded digest is not case-folded. Any read failure,
    including a missing file or a directory, aborts the batch.

    Args:
        hash_file (HashFile): Parsed listing.
        default_algorithm (Optional[Algorithm]): Run default for entries without a tag.
        hashing_service (HashingService): Service performing the streaming reads.
        max_workers (Optional[int]): Thread pool size; None uses the executor default.

    Returns:
        List[VerifyResult]: One result per entry, in listing order.

    Raises:
        DigestIOError: For the first failure in listing order.
    """
    logger.info(f"Verifying {len(hash_file.entries)} entries, max_workers={max_workers}")

    def verify_task(entry: HashEntry) -> VerifyResult:
        algorithm = resolve_algorithm(entry, hash_file, default_algorithm)
        digest = hashing_service.calculate(entry.file, algorithm)
        matched = digest == entry.hash
        if not matched:
            logger.debug(f"Digest mismatch for {entry.file}: expected {entry.hash}, got {digest}")
        return VerifyResult(path=entry.file, matched=matched)

    start_ts = datetime.datetime.now()
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(verify_task, entry) for entry in hash_file.entries]
        results = [future.result() for future in futures]

    duration = (datetime.datetime.now() - start_ts).total_seconds()
    failed = sum(1 for r in results if not r.matched)
    logger.info(f"Verified {len(results)} files in {duration:.2f}s ({failed} mismatched)")
    return results
