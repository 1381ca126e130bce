"""
Main entry point for the polysum CLI.
- Sets up the Click command group and context object.
- Dynamically loads all CLI commands from this directory.
"""
import os
import importlib
import click
import logging
import rich_click as rclick
from services.hashing_service import HashingService
from utils.exceptions import ConfigurationError
from utils.logging_config import setup_logging
from utils.polysum_config import DEFAULT_CONFIG_PATH, load_configuration, load_settings

logger = logging.getLogger(__name__)

@rclick.group()
@click.option('--logfile', '-l', type=click.Path(dir_okay=False, writable=True), help="Log to file")
@click.option('--verbose', '-v', count=True, help="Set verbosity level (-v = INFO, -vv = DEBUG)")
@click.option('--config', '-c', type=click.Path(dir_okay=False), default=DEFAULT_CONFIG_PATH, show_default=True, help="Path to config file (optional)")
@click.version_option(package_name="polysum", message="%(prog)s %(version)s")
@click.pass_context
def polysum_cli(ctx: click.Context, verbose: int, logfile: str, config: str) -> None:
    """
    Compute and verify file checksums with many digest algorithms.

    Output is compatible with the `<hash> <mode><path>` format of common checksum tools.
    """
    # Tests may hand in a prepared context object
    if ctx.obj and all(k in ctx.obj for k in ("config", "settings", "hashing_service")):
        return

    if logfile and os.path.dirname(logfile):
        os.makedirs(os.path.dirname(logfile), exist_ok=True)

    setup_logging(verbosity=verbose, logfile=logfile)

    try:
        cfg = load_configuration(config)
        settings = load_settings(cfg)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        click.secho(f"❌ Configuration error: {e}", fg="red", bold=True, err=True)
        ctx.exit(1)

    ctx.obj = {
        "config": cfg,
        "settings": settings,
        "hashing_service": HashingService(chunk_size=settings.chunk_size),
    }
    logger.info(f"Settings: algorithm={settings.algorithm.value}, mode={settings.mode.value}, "
                f"prefix={settings.prefix}, chunk_size={settings.chunk_size}, max_workers={settings.max_workers}")


# Dynamic discovery loop: auto-register all CLI commands in this directory
COMMAND_DIR = os.path.dirname(__file__)
for filename in sorted(os.listdir(COMMAND_DIR)):
    # Only import .py files that are not main.py or __init__.py
    if filename.endswith(".py") and filename not in {"main.py", "__init__.py"}:
        command_name = filename[:-3]
        module_name = f"cli.{command_name}"
        module = importlib.import_module(module_name)
        cli_function = getattr(module, command_name, None)
        if cli_function:
            polysum_cli.add_command(cli_function)
        else:
            logger.debug(f"No command function found in {module_name}")

if __name__ == '__main__':
    polysum_cli()
