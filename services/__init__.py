"""
Services package for polysum: digest registry and streaming file hashing.
"""
