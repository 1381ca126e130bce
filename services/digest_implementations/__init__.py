"""
StreamingHasher implementations backed by external digest libraries.
"""
