"""
Configuration utilities for polysum.

This package provides section-name normalization and environment variable overrides.
"""

from .config_normalizer import ConfigNormalizer

__all__ = ['ConfigNormalizer']
