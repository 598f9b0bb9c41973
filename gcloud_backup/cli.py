import logging
import sys
import traceback

from gcloud_backup import VERSION
from gcloud_backup.cloud.gcp.api import ComputeClients
from gcloud_backup.config import Configs
from gcloud_backup.export import export_resources, serialize
from gcloud_backup.utils.logging_setup import setup_logging
from gcloud_backup.utils.parser import UsageError, parse_args, print_usage

logger = logging.getLogger(__name__)


def run_export(configs: Configs) -> bytes:
    """Export the requested services and return the JSON document."""
    client = ComputeClients.from_account(configs.account)
    aggregate = export_resources(
        client,
        project=configs.project,
        region=configs.region,
        services=configs.services,
    )
    return serialize(aggregate, readable=configs.readable)


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(argv)
        if args.version:
            print(f"Version: {VERSION}", file=sys.stderr)
            return 1
        if args.help:
            print_usage()
            return 1
        configs = Configs.from_args(args)
    except UsageError as e:
        print_usage(str(e))
        return 1

    setup_logging(configs.verbose)
    logger.info(f"Google cloud backup - {VERSION}")
    logger.debug(f"Configs: {configs.to_dict()}")

    logger.info(f"Starting {configs.action.name} process of {configs.services}")
    if configs.action.import_:
        logger.warning("Import action not implemented, nothing to do")
        return 0

    try:
        output = run_export(configs)
    except Exception as e:
        logger.error(f"Failed: {str(e)}\n{traceback.format_exc()}")
        return 1

    sys.stdout.buffer.write(output)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    exit(main())
