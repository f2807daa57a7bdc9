"""
journal_daemon.observability

Observability package.

Responsibilities:
- Structured logging configuration and the process-wide logger provider.
- Request context propagation for consistent log enrichment.
"""

# Package marker.
