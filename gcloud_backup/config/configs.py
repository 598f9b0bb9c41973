"""Top-level Configs dataclass."""

import argparse
from dataclasses import dataclass
from typing import Any

from gcloud_backup.config.action import Action
from gcloud_backup.utils.parser import UsageError


def parse_services(value: str) -> list[str]:
    """Split the -service flag into names, keeping order and duplicates.

    Empty entries are kept so that they are reported as invalid services.
    """
    if not value:
        raise UsageError("please include a service")
    return [name.strip() for name in value.split(",")]


@dataclass
class Configs:
    action: Action
    services: list[str]
    account: str
    project: str
    region: str | None
    readable: bool
    verbose: bool

    @staticmethod
    def from_args(args: argparse.Namespace) -> "Configs":
        services = parse_services(args.service)
        if not args.account:
            raise UsageError("please specify a Google SDK user account")
        if not args.project:
            raise UsageError("please specify a Google SDK project")
        action = Action.from_args(args)
        return Configs(
            action=action,
            services=services,
            account=args.account,
            project=args.project,
            region=args.region or None,
            readable=args.readable,
            verbose=args.verbose,
        )

    def to_dict(self) -> dict[str, Any]:
        kwargs = {"region": self.region} if self.region else {}
        return {
            "service": self.services,
            "account": self.account,
            "action": self.action.to_dict(),
            "project": self.project,
            **kwargs,
        }
