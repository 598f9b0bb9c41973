"""Export pipeline: exporters, their registry, the coordinator and the serializer."""

from gcloud_backup.export.aggregate import OutputAggregate
from gcloud_backup.export.coordinator import export_resources
from gcloud_backup.export.exporters import (
    AddressesExporter,
    FirewallsExporter,
    NetworksExporter,
    ResourceExporter,
    RoutesExporter,
)
from gcloud_backup.export.registry import ExporterRegistry, default_registry
from gcloud_backup.export.serializer import serialize

__all__ = [
    "OutputAggregate",
    "ResourceExporter",
    "FirewallsExporter",
    "RoutesExporter",
    "NetworksExporter",
    "AddressesExporter",
    "ExporterRegistry",
    "default_registry",
    "export_resources",
    "serialize",
]
