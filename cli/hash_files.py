"""
CLI command to hash files and print checksum-tool compatible lines.
"""
import click
import logging
from typing import Optional, Tuple
from models.algorithm import Algorithm, Mode
from utils.cli_helpers import get_hashing_service, get_settings, report_error
from utils.digest_pipeline import hash_files as run_hash_pipeline
from utils.exceptions import PolysumError
from utils.output_formatter import format_hash_results, write_lines

logger = logging.getLogger(__name__)

@click.command("hash", help="Hash files. Directories are silently ignored.")
@click.argument("files", nargs=-1, type=click.Path(path_type=str))
@click.option("--algorithm", "-a", type=click.Choice(Algorithm.names()), default=None,
              help="Hashing algorithm (default: from config, else blake3)")
@click.option("--mode", "-m", type=click.Choice(Mode.names()), default=None,
              help="Text or binary mode. Only changes the ' ' or '*' printed before each path.")
@click.option("--prefix/--no-prefix", "-p", default=None,
              help="Prepend each output line with the algorithm name")
@click.option("--workers", "-w", type=click.IntRange(min=1), default=None,
              help="Number of worker threads (default: from config, else automatic)")
@click.pass_context
def hash_files(ctx: click.Context, files: Tuple[str, ...], algorithm: Optional[str], mode: Optional[str],
               prefix: Optional[bool], workers: Optional[int]) -> None:
    """
    Hash every given file in parallel and print one line per file, sorted by path.

    Args:
        ctx (click.Context): Click context containing shared settings and services.
        files (Tuple[str, ...]): Files to hash.
        algorithm (Optional[str]): Algorithm name overriding the configured one.
        mode (Optional[str]): Mode overriding the configured one.
        prefix (Optional[bool]): Prefix flag overriding the configured one.
        workers (Optional[int]): Worker count overriding the configured one.

    Returns:
        None. Exits with status 1 on any fatal error.
    """
    settings = get_settings(ctx)
    hashing_service = get_hashing_service(ctx)

    selected_algorithm = Algorithm.resolve(algorithm) if algorithm else settings.algorithm
    selected_mode = Mode(mode) if mode else settings.mode
    use_prefix = settings.prefix if prefix is None else prefix
    max_workers = workers or settings.max_workers

    logger.info(f"hash: {len(files)} paths, algorithm={selected_algorithm.value}, mode={selected_mode.value}, prefix={use_prefix}")

    try:
        results = run_hash_pipeline(files, selected_algorithm, hashing_service, max_workers=max_workers)
    except PolysumError as e:
        report_error(ctx, e)

    lines = format_hash_results(results, selected_algorithm, selected_mode, use_prefix)
    write_lines(lines)
