"""
Compute Engine client bundle using the Google Cloud Python SDK.
"""

import logging
from dataclasses import dataclass
from typing import Any

from google.cloud import compute_v1
from google.protobuf import json_format

from gcloud_backup.cloud.gcp.auth import load_sdk_credentials

logger = logging.getLogger(__name__)


def record_to_dict(record: Any) -> dict[str, Any]:
    """Render a Compute message in the REST API's JSON shape.

    Keys use the API's camelCase names and unset fields are left out.
    """
    return json_format.MessageToDict(type(record).pb(record))


@dataclass
class ComputeClients:
    """Authenticated Compute Engine clients, one per exported resource kind."""

    firewalls: compute_v1.FirewallsClient
    routes: compute_v1.RoutesClient
    networks: compute_v1.NetworksClient
    addresses: compute_v1.AddressesClient

    @staticmethod
    def from_credentials(credentials) -> "ComputeClients":
        return ComputeClients(
            firewalls=compute_v1.FirewallsClient(credentials=credentials),
            routes=compute_v1.RoutesClient(credentials=credentials),
            networks=compute_v1.NetworksClient(credentials=credentials),
            addresses=compute_v1.AddressesClient(credentials=credentials),
        )

    @staticmethod
    def from_account(account: str) -> "ComputeClients":
        """Build clients from the Google Cloud SDK credentials of an account."""
        logger.info("Creating new client from Google SDK config")
        return ComputeClients.from_credentials(load_sdk_credentials(account))
