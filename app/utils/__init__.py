"""
HR Dashboard - Utilities
Activity logging and CSV export.
"""

from .logging import ActivityLogger
from .export import export_roster_csv, export_view_csv, export_filename

__all__ = ["ActivityLogger", "export_roster_csv", "export_view_csv", "export_filename"]
