import logging

from gcloud_backup.cloud.gcp.api import ComputeClients
from gcloud_backup.export.aggregate import OutputAggregate
from gcloud_backup.export.registry import ExporterRegistry, default_registry

logger = logging.getLogger(__name__)


def export_resources(
    client: ComputeClients,
    project: str,
    region: str | None,
    services: list[str],
    registry: ExporterRegistry | None = None,
) -> OutputAggregate:
    """Run the exporter of each requested service, in request order.

    Unknown service names are logged and skipped. A repeated name runs its
    exporter again and replaces the earlier result. Errors raised by an
    exporter abort the export.

    Args:
        client: Authenticated Compute Engine clients
        project: Project to export from
        region: Accepted for future per-region filtering, currently unused
        services: Requested service names
        registry: Exporters to dispatch to, defaults to default_registry()

    Returns:
        The aggregate holding every exported collection
    """
    registry = registry or default_registry()
    aggregate = OutputAggregate()
    for name in services:
        exporter, found = registry.lookup(name)
        if not found:
            logger.warning(
                f"Invalid service - {name!r} "
                f"(valid: {', '.join(registry.names())})"
            )
            continue
        logger.debug(f"Exporting {name}")
        exporter.export(client, project, region, aggregate)
    return aggregate
