"""Mapping from service names to resource exporters."""

from gcloud_backup.export.exporters import BUILTIN_EXPORTERS, ResourceExporter


class ExporterRegistry:
    def __init__(self):
        self._exporters: dict[str, ResourceExporter] = {}

    def register(self, name: str, exporter: ResourceExporter) -> None:
        self._exporters[name] = exporter

    def lookup(self, name: str) -> tuple[ResourceExporter | None, bool]:
        """Return the exporter registered under name and whether it exists."""
        exporter = self._exporters.get(name)
        return exporter, exporter is not None

    def names(self) -> list[str]:
        return list(self._exporters)


def default_registry() -> ExporterRegistry:
    """Registry with the firewalls, routes, networks and addresses exporters."""
    registry = ExporterRegistry()
    for exporter in BUILTIN_EXPORTERS:
        registry.register(exporter.field, exporter)
    return registry
