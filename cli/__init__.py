"""
Command-line interface for polysum. Commands are discovered from this directory by cli.main.
"""
