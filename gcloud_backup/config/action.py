"""Action configuration dataclass."""

import argparse
from dataclasses import dataclass

from gcloud_backup.utils.parser import UsageError


@dataclass
class Action:
    export: bool
    import_: bool

    @staticmethod
    def from_args(args: argparse.Namespace) -> "Action":
        if args.export == args.import_:
            raise UsageError("please select an action - export/import")
        return Action(export=args.export, import_=args.import_)

    @property
    def name(self) -> str:
        return "export" if self.export else "import"

    def to_dict(self) -> dict[str, bool]:
        return {"import": self.import_, "export": self.export}
