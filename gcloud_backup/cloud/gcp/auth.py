"""
Google Cloud SDK credential resolution.

Looks up the credentials `gcloud auth login` stored for one account, so the
export runs as that account rather than as the application default.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from google.auth import credentials as ga_credentials
from google.auth import exceptions as ga_exceptions
from google.oauth2 import credentials as user_credentials
from google.oauth2 import service_account

from gcloud_backup.cloud.gcp.defaults import (
    ADC_FILENAME,
    AUTHORIZED_USER_TYPE,
    CLOUDSDK_CONFIG_DIRNAME,
    CLOUDSDK_CONFIG_ENV,
    COMPUTE_SCOPES,
    LEGACY_CREDENTIALS_DIR,
    SERVICE_ACCOUNT_TYPE,
)

logger = logging.getLogger(__name__)


class BootstrapError(RuntimeError):
    """Raised when no usable credentials exist for the requested account."""


def sdk_config_dir() -> Path:
    """Return the Google Cloud SDK configuration directory."""
    override = os.environ.get(CLOUDSDK_CONFIG_ENV)
    if override:
        return Path(override)
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / CLOUDSDK_CONFIG_DIRNAME
    return Path.home() / ".config" / CLOUDSDK_CONFIG_DIRNAME


def account_credentials_path(account: str, config_dir: Path | None = None) -> Path:
    base = config_dir or sdk_config_dir()
    return base / LEGACY_CREDENTIALS_DIR / account / ADC_FILENAME


def credentials_from_info(info: dict[str, Any]) -> ga_credentials.Credentials:
    """Build credentials from the parsed contents of an adc.json file.

    User credentials are refreshed with the scopes of their original grant.
    Service account keys carry no grant, so they get COMPUTE_SCOPES.
    """
    if not isinstance(info, dict):
        raise BootstrapError("Credential file does not hold a JSON object")
    cred_type = info.get("type")
    if cred_type == AUTHORIZED_USER_TYPE:
        return user_credentials.Credentials.from_authorized_user_info(info)
    if cred_type == SERVICE_ACCOUNT_TYPE:
        return service_account.Credentials.from_service_account_info(
            info, scopes=COMPUTE_SCOPES
        )
    raise BootstrapError(f"Unsupported credential type: {cred_type!r}")


def load_sdk_credentials(
    account: str,
    config_dir: Path | None = None,
) -> ga_credentials.Credentials:
    """Load the stored Google Cloud SDK credentials of an account.

    Args:
        account: Account the SDK was authenticated with (e.g. user@example.com)
        config_dir: SDK config directory, defaults to sdk_config_dir()

    Returns:
        Credentials for the account

    Raises:
        BootstrapError: If the account has no stored credentials or they
            cannot be loaded
    """
    path = account_credentials_path(account, config_dir)
    if not path.is_file():
        raise BootstrapError(
            f"No Google SDK credentials found for account {account} "
            f"(expected {path}). Run `gcloud auth login {account}` first"
        )

    logger.debug(f"Loading Google SDK credentials from {path}")
    try:
        with open(path) as f:
            info = json.load(f)
        return credentials_from_info(info)
    except (ValueError, ga_exceptions.GoogleAuthError) as e:
        raise BootstrapError(
            f"Failed to load Google SDK credentials for {account}: {e}"
        ) from e
