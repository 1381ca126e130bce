"""
Utilities for polysum: listing parser, digest pipeline, output formatting, config and logging.
"""
