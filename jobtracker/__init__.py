"""
Job Tracker: local job application tracking on SQLite.
"""

__version__ = "1.0.0"
