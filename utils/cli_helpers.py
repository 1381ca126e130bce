#!/usr/bin/env python3
"""
CLI helper utilities for consistent error handling and context access.
"""

import logging
from typing import Any, NoReturn, Optional
import click
from models.settings import HashingSettings
from services.hashing_service import HashingService
from utils.exceptions import PolysumError

logger = logging.getLogger(__name__)


def get_from_context(ctx: click.Context, name: str, required: bool = True) -> Optional[Any]:
    """
    Get a shared object from the Click context with proper error handling.

    Args:
        ctx: Click context object
        name: Key of the object in ctx.obj (e.g. 'settings', 'hashing_service')
        required: Whether a missing object is an error

    Returns:
        The object, or None if missing and not required
    """
    value = ctx.obj.get(name) if ctx.obj else None
    if value is None and required:
        fail(ctx, f"{name} not available. Configuration may not be loaded properly.")
    return value


def get_settings(ctx: click.Context) -> HashingSettings:
    return get_from_context(ctx, "settings")


def get_hashing_service(ctx: click.Context) -> HashingService:
    return get_from_context(ctx, "hashing_service")


def fail(ctx: click.Context, message: str) -> NoReturn:
    """Print a red error message to stderr and exit with status 1."""
    click.secho(f"❌ Error: {message}", fg="red", bold=True, err=True)
    ctx.exit(1)


def report_error(ctx: click.Context, error: PolysumError) -> NoReturn:
    """
    Log a fatal polysum error and exit with status 1.

    Args:
        ctx: Click context object
        error: The error surfaced from the hashing core
    """
    logger.error(f"{type(error).__name__}: {error}")
    logger.debug("Traceback:", exc_info=error)
    fail(ctx, str(error))
