"""
journal_daemon.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, the shared database client and DAOs.
"""

# Package marker.
