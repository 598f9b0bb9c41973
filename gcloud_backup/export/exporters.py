"""
Resource exporters.

Each exporter fetches every record of one Compute Engine resource kind for a
project and stores them in its field of the output aggregate. New kinds are
added by subclassing ResourceExporter and registering an instance.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from gcloud_backup.cloud.gcp.api import ComputeClients, record_to_dict
from gcloud_backup.export.aggregate import OutputAggregate, Record

logger = logging.getLogger(__name__)


class ResourceExporter(ABC):
    """Fetches one resource kind into one aggregate field."""

    # Aggregate field, also the service name users request
    field: str

    @abstractmethod
    def fetch(
        self,
        client: ComputeClients,
        project: str,
        region: str | None = None,
    ) -> Any:
        """Return every record of this resource kind in the project.

        API errors are not caught here; a failed fetch fails the export.
        """
        raise NotImplementedError

    def export(
        self,
        client: ComputeClients,
        project: str,
        region: str | None,
        aggregate: OutputAggregate,
    ) -> None:
        aggregate.set(self.field, self.fetch(client, project, region))


class ListExporter(ResourceExporter):
    """Exporter backed by a project-wide `list` call."""

    def fetch(
        self,
        client: ComputeClients,
        project: str,
        region: str | None = None,
    ) -> list[Record]:
        # The SDK pager follows page tokens while iterating
        pager = getattr(client, self.field).list(project=project)
        records = [record_to_dict(item) for item in pager]
        logger.info(f"Fetched {len(records)} {self.field} from {project}")
        return records


class FirewallsExporter(ListExporter):
    field = "firewalls"


class RoutesExporter(ListExporter):
    field = "routes"


class NetworksExporter(ListExporter):
    field = "networks"


class AddressesExporter(ResourceExporter):
    """Exports addresses of every region, keyed by scope (e.g. regions/us-east1).

    Scopes without addresses are left out.
    """

    field = "addresses"

    def fetch(
        self,
        client: ComputeClients,
        project: str,
        region: str | None = None,
    ) -> dict[str, list[Record]]:
        addresses: dict[str, list[Record]] = {}
        for scope, scoped_list in client.addresses.aggregated_list(project=project):
            if not scoped_list.addresses:
                continue
            addresses[scope] = [
                record_to_dict(address) for address in scoped_list.addresses
            ]
        total = sum(len(records) for records in addresses.values())
        logger.info(
            f"Fetched {total} addresses in {len(addresses)} scopes from {project}"
        )
        return addresses


BUILTIN_EXPORTERS: list[ResourceExporter] = [
    FirewallsExporter(),
    RoutesExporter(),
    NetworksExporter(),
    AddressesExporter(),
]
