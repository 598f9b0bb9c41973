"""Output aggregate for one export run."""

from dataclasses import dataclass, fields
from typing import Any

Record = dict[str, Any]


@dataclass
class OutputAggregate:
    """Resource collections gathered by one export run.

    A field stays None until its exporter runs.
    """

    firewalls: list[Record] | None = None
    routes: list[Record] | None = None
    networks: list[Record] | None = None
    addresses: dict[str, list[Record]] | None = None

    def set(self, field: str, records: Any) -> None:
        if field not in self.field_names():
            raise KeyError(f"Unknown aggregate field: {field}")
        setattr(self, field, records)

    def populated(self) -> list[str]:
        return [name for name in self.field_names() if getattr(self, name) is not None]

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> dict[str, Any]:
        # Empty collections are left out like unrequested ones
        return {
            name: getattr(self, name)
            for name in self.field_names()
            if getattr(self, name)
        }
