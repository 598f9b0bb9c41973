"""
GCP client utilities.

This package contains all GCP-specific functionality including:
- defaults: Default constants for the Google Cloud SDK and Compute API
- auth: Google Cloud SDK credential resolution
- api: Compute Engine client bundle
"""

from gcloud_backup.cloud.gcp.api import ComputeClients
from gcloud_backup.cloud.gcp.auth import BootstrapError, load_sdk_credentials

__all__ = [
    "BootstrapError",
    "ComputeClients",
    "load_sdk_credentials",
]
