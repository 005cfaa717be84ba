from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Final

from dotenv import load_dotenv

from campuscoffee.app import (
    clear_all_pos,
    get_all_pos,
    get_pos_by_id,
    import_pos_from_osm,
    save_pos,
)
from campuscoffee.config import ConfigurationError, configure_logging
from campuscoffee.domain.errors import (
    CampusCoffeeError,
    DuplicatePosNameError,
    OsmApiError,
    OsmNodeMissingFieldsError,
    OsmNodeNotFoundError,
    PosNotFoundError,
)
from campuscoffee.ui.dto import PosDto

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from campuscoffee.domain.model import Pos

log = logging.getLogger(__name__)

EXIT_FAILURE: Final = 1
EXIT_USAGE: Final = 2
EXIT_NOT_FOUND: Final = 4
EXIT_UPSTREAM_UNAVAILABLE: Final = 5
EXIT_MISSING_FIELDS: Final = 6
EXIT_DUPLICATE_NAME: Final = 7

_EXIT_CODES: Final[tuple[tuple[type[CampusCoffeeError], int], ...]] = (
    (PosNotFoundError, EXIT_NOT_FOUND),
    (OsmNodeNotFoundError, EXIT_NOT_FOUND),
    (OsmApiError, EXIT_UPSTREAM_UNAVAILABLE),
    (OsmNodeMissingFieldsError, EXIT_MISSING_FIELDS),
    (DuplicatePosNameError, EXIT_DUPLICATE_NAME),
)


def exit_code_for(exc: BaseException) -> int:
    """Return the stable process exit code for an error raised by a command."""

    for error_type, code in _EXIT_CODES:
        if isinstance(exc, error_type):
            return code
    if isinstance(exc, (ValueError, ConfigurationError)):
        return EXIT_USAGE
    return EXIT_FAILURE


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage campus points of sale")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_osm = subparsers.add_parser(
        "import-osm",
        help="Create or update a POS from an OpenStreetMap node",
    )
    import_osm.add_argument("node_id", type=_positive_int, help="OpenStreetMap node id")

    subparsers.add_parser("list", help="List all POS")

    get = subparsers.add_parser("get", help="Show a single POS")
    get.add_argument("pos_id", type=_positive_int, help="POS id")

    create = subparsers.add_parser("create", help="Create a POS from JSON")
    create.add_argument("--json", dest="payload", required=True, help="POS as a JSON object")

    update = subparsers.add_parser("update", help="Update a POS from JSON")
    update.add_argument("pos_id", type=_positive_int, help="POS id")
    update.add_argument("--json", dest="payload", required=True, help="POS as a JSON object")

    subparsers.add_parser("clear", help="Delete all POS")

    return parser.parse_args(list(argv))


def _emit(payload: PosDto | list[PosDto]) -> None:
    if isinstance(payload, list):
        body = "[" + ",".join(item.model_dump_json() for item in payload) + "]"
    else:
        body = payload.model_dump_json()
    print(body)  # noqa: T201


def _pos_from_json(payload: str) -> Pos:
    return PosDto.model_validate_json(payload).to_domain()


def _run_command(args: argparse.Namespace) -> None:
    if args.command == "import-osm":
        result = import_pos_from_osm(args.node_id)
        outcome = "Created" if result.created else "Updated"
        log.info("%s POS %s from OSM node %s", outcome, result.pos.id, args.node_id)
        _emit(PosDto.from_domain(result.pos))
    elif args.command == "list":
        _emit([PosDto.from_domain(pos) for pos in get_all_pos()])
    elif args.command == "get":
        _emit(PosDto.from_domain(get_pos_by_id(args.pos_id)))
    elif args.command == "create":
        pos = _pos_from_json(args.payload)
        if pos.id is not None:
            raise ValueError("A new POS must not carry an id")
        _emit(PosDto.from_domain(save_pos(pos)))
    elif args.command == "update":
        pos = _pos_from_json(args.payload)
        if pos.id != args.pos_id:
            raise ValueError("POS ID in path and body do not match.")
        _emit(PosDto.from_domain(save_pos(pos)))
    elif args.command == "clear":
        clear_all_pos()
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO, force=True)

    try:
        _run_command(parsed_args)
    except CampusCoffeeError as exc:
        log.error("%s: %s", type(exc).__name__, exc)  # noqa: TRY400
        sys.exit(exit_code_for(exc))
    except Exception as exc:
        log.exception("Command %s failed", parsed_args.command)
        sys.exit(exit_code_for(exc))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
