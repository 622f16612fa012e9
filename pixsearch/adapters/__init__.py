"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (HTTP transport, JSON
    codec, connectivity probing, and the Pixabay search API) plus the typed
    request executor they are built around.

Dependencies:
    Individual submodules depend on ``requests``, ``pydantic`` and domain
    protocol definitions.

Call context:
    Imported by the composition root (for runtime wiring) and by tests (for
    stubs and transport-level behavior verification).
"""
