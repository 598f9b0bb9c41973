"""Utility module for common helper functions.

Import directly from submodules when needed:
  - from gcloud_backup.utils.logging_setup import ...
  - from gcloud_backup.utils.parser import ...
"""

__all__ = [
    "logging_setup",
    "parser",
]
