"""
Roster use cases.

The session loop calls these instead of touching the record list directly.
"""

from .roster import RosterService

__all__ = ["RosterService"]
