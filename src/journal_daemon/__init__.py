"""
journal_daemon

Top-level package for the journal daemon data-access service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal; importing the package must not open DB connections.
