import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .byte_reader import ByteReader
from .config import CONFIG_PATH, CliConfig, load_config, save_config
from .errors import ResolutionError
from .history import log_event
from .pillow_check import pillow_dpi
from .png import list_chunk_types
from .resolution import get_image_resolution, inspect_resolution
from .sniffer import is_png


def _read_file(path: str) -> Optional[bytes]:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
        return None


def _format_value(value: Optional[float], precision: int) -> str:
    if value is None:
        return "-"
    return f"{value:.{precision}f}"


def _run_dpi(args: argparse.Namespace, config: CliConfig) -> int:
    status = 0
    for path in args.files:
        data = _read_file(path)
        if data is None:
            status = 1
            continue
        print(f"{path}\t{_format_value(get_image_resolution(data), config.precision)}")
    return status


def _run_inspect(args: argparse.Namespace, config: CliConfig) -> int:
    data = _read_file(args.file)
    if data is None:
        return 1
    report = inspect_resolution(data)
    unit = report.candidate.unit
    lines = [
        f"file: {args.file}",
        f"format: {report.format}",
        f"x: {_format_value(report.candidate.x, config.precision)}",
        f"y: {_format_value(report.candidate.y, config.precision)}",
        f"unit: {'-' if unit is None else unit}",
        f"mapped: {_format_value(report.mapped_resolution, config.precision)}",
        f"resolution: {_format_value(report.resolution, config.precision)}",
    ]
    if report.error:
        lines.append(f"error: {report.error}")
    print("\n".join(lines))
    return 0


def _run_chunks(args: argparse.Namespace, config: CliConfig) -> int:
    data = _read_file(args.file)
    if data is None:
        return 1
    reader = ByteReader(data)
    if not is_png(reader):
        print(f"{args.file}: not a PNG file", file=sys.stderr)
        return 1
    try:
        chunk_types = list_chunk_types(reader)
    except ResolutionError as exc:
        print(f"{args.file}: {exc}", file=sys.stderr)
        return 1
    for chunk_type in chunk_types:
        print(chunk_type)
    return 0


def _run_compare(args: argparse.Namespace, config: CliConfig) -> int:
    status = 0
    for path in args.files:
        data = _read_file(path)
        if data is None:
            status = 1
            continue
        ours = get_image_resolution(data)
        theirs = pillow_dpi(path)
        pillow_text = (
            "-"
            if theirs is None
            else "x".join(_format_value(value, config.precision) for value in theirs)
        )
        print(f"{path}\t{_format_value(ours, config.precision)}\t{pillow_text}")
    return status


def _run_config(args: argparse.Namespace, config: CliConfig) -> int:
    changed = False
    if args.history is not None:
        config.history_enabled = args.history
        changed = True
    if args.history_path is not None:
        config.history_path = Path(args.history_path).expanduser()
        changed = True
    if args.precision is not None:
        if args.precision < 0:
            print("--precision must not be negative.", file=sys.stderr)
            return 2
        config.precision = args.precision
        changed = True
    if changed:
        save_config(config, args.config_path)
    print(f"history_enabled: {config.history_enabled}")
    print(f"history_path: {config.history_path}")
    print(f"precision: {config.precision}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Read the resolution (pixels per inch) stored in JPEG and PNG metadata."
    )
    parser.add_argument(
        "--no-history", action="store_true", help="Do not record the operation in history."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser diagnostics.")
    parser.add_argument(
        "--config-path",
        type=Path,
        default=CONFIG_PATH,
        help="Settings file (default: ~/.image_resolution.json).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    dpi_parser = subparsers.add_parser("dpi", help="Print the resolution of each file.")
    dpi_parser.add_argument("files", nargs="+")
    dpi_parser.set_defaults(func=_run_dpi)

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show the detected format and raw resolution fields."
    )
    inspect_parser.add_argument("file")
    inspect_parser.set_defaults(func=_run_inspect)

    chunks_parser = subparsers.add_parser("chunks", help="List PNG chunk types in order.")
    chunks_parser.add_argument("file")
    chunks_parser.set_defaults(func=_run_chunks)

    compare_parser = subparsers.add_parser(
        "compare", help="Print our resolution next to the DPI Pillow reports."
    )
    compare_parser.add_argument("files", nargs="+")
    compare_parser.set_defaults(func=_run_compare)

    config_parser = subparsers.add_parser("config", help="Show or update CLI settings.")
    history_group = config_parser.add_mutually_exclusive_group()
    history_group.add_argument(
        "--enable-history", dest="history", action="store_true", default=None, help="Record history."
    )
    history_group.add_argument(
        "--disable-history",
        dest="history",
        action="store_false",
        default=None,
        help="Stop recording history.",
    )
    config_parser.add_argument("--history-path", help="History file location.")
    config_parser.add_argument("--precision", type=int, help="Decimal places when printing.")
    config_parser.set_defaults(func=_run_config)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = load_config(args.config_path)
    status = args.func(args, config)
    if not args.no_history and config.history_enabled:
        log_event(
            action=args.command,
            payload={
                "files": getattr(args, "files", None) or getattr(args, "file", None),
                "status": status,
            },
            path=config.history_path,
        )
    return status


if __name__ == "__main__":
    sys.exit(main())
