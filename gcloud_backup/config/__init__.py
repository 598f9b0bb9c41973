"""Configuration dataclasses for backup runs."""

from gcloud_backup.config.action import Action
from gcloud_backup.config.configs import Configs, parse_services

__all__ = [
    "Action",
    "Configs",
    "parse_services",
]
