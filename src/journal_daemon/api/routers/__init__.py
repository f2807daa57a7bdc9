"""
journal_daemon.api.routers

Router package.
"""

# Package marker.
