"""
CLI command to verify files against a previously recorded checksum listing.
"""
import click
import logging
from typing import Optional
from models.algorithm import Algorithm
from utils.cli_helpers import get_hashing_service, get_settings, report_error
from utils.digest_pipeline import verify_hash_file
from utils.exceptions import PolysumError
from utils.hashfile_parser import parse_hash_file
from utils.output_formatter import format_verify_results, write_lines

logger = logging.getLogger(__name__)

@click.command("check", help="Verify files against a checksum listing. Prints OK or ERR per file.")
@click.argument("listing", type=click.Path(path_type=str))
@click.option("--algorithm", "-a", type=click.Choice(Algorithm.names()), default=None,
              help="Algorithm for entries without an algorithm tag (default: from config, else blake3)")
@click.option("--workers", "-w", type=click.IntRange(min=1), default=None,
              help="Number of worker threads (default: from config, else automatic)")
@click.pass_context
def check(ctx: click.Context, listing: str, algorithm: Optional[str], workers: Optional[int]) -> None:
    """
    Parse a listing, re-hash every referenced file and report whether it still matches.

    Mismatches are printed as ERR and do not change the exit status. Unreadable files,
    malformed lines and unknown algorithms are fatal.

    Args:
        ctx (click.Context): Click context containing shared settings and services.
        listing (str): Path of the checksum listing.
        algorithm (Optional[str]): Default algorithm overriding the configured one.
        workers (Optional[int]): Worker count overriding the configured one.

    Returns:
        None. Exits with status 1 on any fatal error.
    """
    settings = get_settings(ctx)
    hashing_service = get_hashing_service(ctx)

    default_algorithm = Algorithm.resolve(algorithm) if algorithm else settings.algorithm
    max_workers = workers or settings.max_workers

    logger.info(f"check: listing={listing}, default algorithm={default_algorithm.value}")

    try:
        hash_file = parse_hash_file(listing)
        results = verify_hash_file(hash_file, default_algorithm, hashing_service, max_workers=max_workers)
    except PolysumError as e:
        report_error(ctx, e)

    write_lines(format_verify_results(results))

    mismatched = [r.path for r in results if not r.matched]
    if mismatched:
        logger.warning(f"{len(mismatched)} of {len(results)} files did not match: {', '.join(mismatched)}")
