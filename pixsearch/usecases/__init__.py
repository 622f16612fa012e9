"""Use-case layer for photo-search workflows.

Each module coordinates domain objects and ports without performing transport
I/O directly.
"""
