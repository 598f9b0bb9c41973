import json

from gcloud_backup.export.aggregate import OutputAggregate

READABLE_INDENT = 2


def serialize(aggregate: OutputAggregate, readable: bool = False) -> bytes:
    """Render the aggregate as JSON, indented when readable.

    No trailing newline is written.
    """
    if readable:
        text = json.dumps(
            aggregate.to_dict(), indent=READABLE_INDENT, ensure_ascii=False
        )
    else:
        text = json.dumps(
            aggregate.to_dict(), separators=(",", ":"), ensure_ascii=False
        )
    return text.encode("utf-8")
