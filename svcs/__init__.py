"""SVCS - a minimal local version control system.

Tracks a set of files, snapshots them into hash-named commits
and restores any earlier snapshot.
"""

__version__ = "1.0.0"
