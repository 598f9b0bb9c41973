"""Tests for Google Cloud SDK credential resolution."""

import json
import warnings
from pathlib import Path

import pytest
from google.auth.credentials import AnonymousCredentials
from google.cloud import compute_v1

from gcloud_backup.cloud.gcp.api import ComputeClients
from gcloud_backup.cloud.gcp.auth import (
    BootstrapError,
    account_credentials_path,
    load_sdk_credentials,
    sdk_config_dir,
)
from gcloud_backup.cloud.gcp.defaults import COMPUTE_SCOPES

ACCOUNT = "backup@example.com"


def write_adc(config_dir: Path, account: str, content: str) -> Path:
    path = config_dir / "legacy_credentials" / account / "adc.json"
    path.parent.mkdir(parents=True)
    path.write_text(content)
    return path


@pytest.fixture
def authorized_user():
    return json.dumps(
        {
            "type": "authorized_user",
            "client_id": "client-id.apps.googleusercontent.com",
            "client_secret": "secret",
            "refresh_token": "refresh-token",
        }
    )


class TestSdkConfigDir:
    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CLOUDSDK_CONFIG", str(tmp_path))
        assert sdk_config_dir() == tmp_path

    def test_account_path(self, tmp_path):
        assert account_credentials_path(ACCOUNT, tmp_path) == (
            tmp_path / "legacy_credentials" / ACCOUNT / "adc.json"
        )


class TestLoadSdkCredentials:
    def test_loads_authorized_user(self, tmp_path, authorized_user):
        write_adc(tmp_path, ACCOUNT, authorized_user)
        credentials = load_sdk_credentials(ACCOUNT, config_dir=tmp_path)
        assert credentials.refresh_token == "refresh-token"

    def test_user_keeps_granted_scopes(self, tmp_path, authorized_user):
        write_adc(tmp_path, ACCOUNT, authorized_user)
        credentials = load_sdk_credentials(ACCOUNT, config_dir=tmp_path)
        assert credentials.scopes is None

    def test_no_deprecation_warning(self, tmp_path, authorized_user):
        write_adc(tmp_path, ACCOUNT, authorized_user)
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            load_sdk_credentials(ACCOUNT, config_dir=tmp_path)

    def test_unsupported_type(self, tmp_path):
        write_adc(tmp_path, ACCOUNT, json.dumps({"type": "external_account"}))
        with pytest.raises(BootstrapError, match="external_account"):
            load_sdk_credentials(ACCOUNT, config_dir=tmp_path)

    def test_missing_refresh_token(self, tmp_path):
        info = {"type": "authorized_user", "client_id": "id", "client_secret": "s"}
        write_adc(tmp_path, ACCOUNT, json.dumps(info))
        with pytest.raises(BootstrapError):
            load_sdk_credentials(ACCOUNT, config_dir=tmp_path)

    def test_not_an_object(self, tmp_path):
        write_adc(tmp_path, ACCOUNT, "[]")
        with pytest.raises(BootstrapError):
            load_sdk_credentials(ACCOUNT, config_dir=tmp_path)

    def test_uses_env_config_dir(self, monkeypatch, tmp_path, authorized_user):
        monkeypatch.setenv("CLOUDSDK_CONFIG", str(tmp_path))
        write_adc(tmp_path, ACCOUNT, authorized_user)
        assert load_sdk_credentials(ACCOUNT).client_secret == "secret"

    def test_unknown_account(self, tmp_path, authorized_user):
        write_adc(tmp_path, ACCOUNT, authorized_user)
        with pytest.raises(BootstrapError, match="other@example.com"):
            load_sdk_credentials("other@example.com", config_dir=tmp_path)

    def test_corrupt_file(self, tmp_path):
        write_adc(tmp_path, ACCOUNT, "{not json")
        with pytest.raises(BootstrapError):
            load_sdk_credentials(ACCOUNT, config_dir=tmp_path)


class TestComputeClients:
    def test_from_credentials(self):
        clients = ComputeClients.from_credentials(AnonymousCredentials())
        assert isinstance(clients.firewalls, compute_v1.FirewallsClient)
        assert isinstance(clients.routes, compute_v1.RoutesClient)
        assert isinstance(clients.networks, compute_v1.NetworksClient)
        assert isinstance(clients.addresses, compute_v1.AddressesClient)

    def test_from_account_without_credentials(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CLOUDSDK_CONFIG", str(tmp_path))
        with pytest.raises(BootstrapError):
            ComputeClients.from_account(ACCOUNT)
