"""
journal_daemon.db.daos

Data-access objects.

Responsibilities:
- Group read accessors over the shared database client.
"""

# Package marker; DAOs are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# DAOs are intentionally thin; they never commit and never translate driver errors.
