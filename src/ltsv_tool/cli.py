from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ltsv_tool.config import configure_logging, load_settings
from ltsv_tool.core import (
    ErrorKind,
    LineSource,
    LtsvError,
    Record,
    each_record,
    group_by,
    open_file,
    order_by,
    parse_head,
)

LOGGER = logging.getLogger(__name__)

_EXIT_CODES = {ErrorKind.IO: 2, ErrorKind.PARSE: 1}


def _parse_labels(s: str) -> list[str]:
    out = [part.strip() for part in s.split(",") if part.strip()]
    if not out:
        raise argparse.ArgumentTypeError("At least one label must be provided")
    return out


def format_record(record: Record, labels: Sequence[str] | None = None) -> str:
    """Render a record as tab-separated ``label:value`` pairs."""
    if labels is None:
        items = record.items()
    else:
        items = [(label, record[label]) for label in labels if label in record]
    return "\t".join(f"{label}:{value}" for label, value in items)


def _cmd_head(args: argparse.Namespace, source: LineSource) -> None:
    record = parse_head(source)
    if record is None:
        return
    for label in sorted(record):
        print(label)


def _cmd_cat(args: argparse.Namespace, source: LineSource) -> None:
    each_record(source, lambda record: print(format_record(record, args.labels)))


def _cmd_group(args: argparse.Namespace, source: LineSource) -> None:
    counts = group_by(source, args.label)
    for value, count in sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])):
        print(f"{value}\t{count}")


def _cmd_order(args: argparse.Namespace, source: LineSource) -> None:
    lines = order_by(source, args.label)
    if args.reverse:
        lines.reverse()
    sys.stdout.writelines(lines)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ltsv", description="Inspect LTSV (Labeled Tab-Separated Values) data.")
    sub = p.add_subparsers(dest="command", required=True)

    head = sub.add_parser("head", help="Print the labels of the first record")
    head.set_defaults(func=_cmd_head)

    cat = sub.add_parser("cat", help="Print every record as label:value pairs")
    cat.add_argument("--labels", type=_parse_labels, default=None, help="Comma-separated labels to keep, in order")
    cat.set_defaults(func=_cmd_cat)

    group = sub.add_parser("group", help="Count records per value of a label")
    group.add_argument("-l", "--label", required=True)
    group.set_defaults(func=_cmd_group)

    order = sub.add_parser("order", help="Sort lines by the value of a label")
    order.add_argument("-l", "--label", required=True)
    order.add_argument("--reverse", action="store_true", help="Emit in descending order")
    order.set_defaults(func=_cmd_order)

    for sp in (head, cat, group, order):
        sp.add_argument("file", nargs="?", default="-", help="Input file, '-' for stdin (default)")

    return p


def main(argv: Sequence[str] | None = None) -> None:
    configure_logging()
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        with open_file(args.file, encoding=settings.encoding, errors=settings.decode_errors) as source:
            args.func(args, source)
    except LtsvError as e:
        LOGGER.debug("%s failed on %s", args.command, args.file, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(_EXIT_CODES[e.kind])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)


if __name__ == "__main__":
    main()
