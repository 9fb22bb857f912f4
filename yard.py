#!/usr/bin/env python3
"""
Command-line board for the bus yard.

Commands:
  board    - Show a facility board, or all facilities merged
  bays     - List free bays at a facility
  search   - Find buses by label or bay
  move     - Move a bus to another category
  update   - Edit a bus's display fields
  summary  - Bus counts and category breakdown per facility

State is loaded from the fleet seed file on every run; moves and edits
only affect the board printed by that run.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional, Sequence

from depot import (
    Board,
    BoardStore,
    Bus,
    Category,
    DepotError,
    MoveReason,
    SearchHit,
    TransitionEngine,
    available_bays,
    load_fleet,
    search,
    status_breakdown,
    vehicles_assigned,
)

DEFAULT_FLEET_FILE = Path(__file__).parent / "fleet.yaml"

MOVE_MESSAGES = {
    MoveReason.BAY_REQUIRED: "a bay is required for this category (use --bay)",
    MoveReason.BAY_INVALID: "that bay does not exist at this facility",
    MoveReason.BAY_TAKEN: "that bay is already taken",
}

# =============================================================================
# Formatting helpers
# =============================================================================


def format_bay(bus: Bus) -> str:
    """Format bay for display."""
    return str(bus.bay_number) if bus.bay_number is not None else "-"


def truncate(text: Optional[str], max_len: int = 30) -> str:
    """Truncate text with ellipsis if too long."""
    if text is None:
        return "-"
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def make_bus_table(buses: Sequence[Bus]) -> List[List[str]]:
    """Convert a category list to table rows."""
    return [
        [
            bus.label,
            bus.status,
            format_bay(bus),
            bus.last_service or "-",
            truncate(bus.notes),
        ]
        for bus in buses
    ]


def make_search_table(hits: List[SearchHit]) -> List[List[str]]:
    """Convert search hits to table rows, showing where each bus sits."""
    return [
        [
            hit.bus.label,
            hit.facility_id or "-",
            hit.category.label,
            format_bay(hit.bus),
            hit.bus.status,
        ]
        for hit in hits
    ]


def print_board(title: str, board: Board) -> None:
    print(title)
    print()
    headers = ["Bus", "Status", "Bay", "Last Service", "Notes"]
    for category, buses in board.items():
        if not buses:
            continue
        print(f"{category.label.upper()} ({len(buses)}):")
        print(tabulate(make_bus_table(buses), headers=headers, tablefmt="simple"))
        print()


def resolve_board(store: BoardStore, facility: Optional[str]) -> Board:
    if facility is None:
        return store.get_merged_board()
    return store.get_board(facility)


def check_facility(store: BoardStore, facility: Optional[str]) -> bool:
    if facility is None or facility in store.facility_ids:
        return True
    print(f"Error: Unknown facility '{facility}'")
    print(f"Facilities: {', '.join(store.facility_ids)}")
    return False


# =============================================================================
# Commands
# =============================================================================


def cmd_board(store: BoardStore, args) -> int:
    """Show a facility board, or the merged board."""
    if not check_facility(store, args.facility):
        return 1
    title = args.facility or "All facilities"
    print_board(f"Board: {title}", resolve_board(store, args.facility))
    return 0


def cmd_bays(store: BoardStore, args) -> int:
    """List free bays."""
    if not check_facility(store, args.facility):
        return 1
    facility = store.facility(args.facility)
    free = available_bays(store, facility.id, exclude_bus_id=args.exclude)
    print(f"Facility: {facility.name}")
    print(f"Bays: {', '.join(str(b) for b in facility.bays) or '-'}")
    print(f"Available: {', '.join(str(b) for b in free) or 'none'}")
    return 0


def cmd_search(store: BoardStore, args) -> int:
    """Find buses by label text or bay."""
    if not check_facility(store, args.facility):
        return 1
    hits = search(resolve_board(store, args.facility), args.query)
    if not hits:
        print("No buses found.")
        return 0
    headers = ["Bus", "Facility", "Category", "Bay", "Status"]
    print(tabulate(make_search_table(hits), headers=headers, tablefmt="simple"))
    return 0


def cmd_move(store: BoardStore, args) -> int:
    """Move a bus to another category."""
    location = store.locate(args.bus_id)
    if location is None:
        print(f"Error: Unknown bus '{args.bus_id}'")
        return 1

    engine = TransitionEngine(store)
    result = engine.move_located(
        args.bus_id, args.to_category, requested_bay=args.bay, target_index=args.index
    )
    if not result:
        print(f"Move refused ({result.reason.value}): {MOVE_MESSAGES[result.reason]}")
        free = available_bays(store, location.facility_id, exclude_bus_id=args.bus_id)
        print(f"Available bays at {location.facility_id}: {', '.join(map(str, free)) or 'none'}")
        return 1

    print(f"Moved {args.bus_id} to {Category(args.to_category).label}.")
    print()
    print_board(f"Board: {location.facility_id}", store.get_board(location.facility_id))
    return 0


def cmd_update(store: BoardStore, args) -> int:
    """Edit display fields, and optionally the category, of a bus."""
    location = store.locate(args.bus_id)
    if location is None:
        print(f"Error: Unknown bus '{args.bus_id}'")
        return 1

    patch = {
        key: value
        for key, value in (
            ("label", args.label),
            ("status", args.status),
            ("last_service", args.last_service),
            ("notes", args.notes),
        )
        if value is not None
    }
    # Edit-form moves keep the status text in step with the new category
    if args.category is not None and args.status is None:
        patch["status"] = Category(args.category).label
    store.update_bus(location.facility_id, location.category, args.bus_id, patch)

    if args.category is not None:
        result = TransitionEngine(store).move_vehicle(
            location.facility_id,
            location.category,
            args.category,
            args.bus_id,
            requested_bay=args.bay,
        )
        if not result:
            print(f"Fields saved, move refused ({result.reason.value}): "
                  f"{MOVE_MESSAGES[result.reason]}")
            return 1

    print(f"Updated {args.bus_id}.")
    print()
    print_board(f"Board: {location.facility_id}", store.get_board(location.facility_id))
    return 0


def cmd_summary(store: BoardStore, args) -> int:
    """Bus counts and category breakdown per facility."""
    rows = []
    for facility in store.facilities:
        board = store.get_board(facility.id)
        breakdown = ", ".join(
            f"{category.label} {pct}%" for category, pct in status_breakdown(board)
        )
        free = available_bays(store, facility.id)
        rows.append(
            [facility.name, vehicles_assigned(board), f"{len(free)}/{len(facility.bays)}", breakdown or "-"]
        )
    headers = ["Facility", "Buses", "Free Bays", "Breakdown"]
    print(tabulate(rows, headers=headers, tablefmt="simple"))
    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    categories = [c.value for c in Category]

    parser = argparse.ArgumentParser(
        description="Bus yard board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s board
  %(prog)s board --facility MOB1
  %(prog)s bays "Miller BRT"
  %(prog)s search "bay 2"
  %(prog)s move bus-103 maintenance --bay 5
  %(prog)s update bus-104 --status "On route" --notes "Route 9"
  %(prog)s summary
""",
    )
    parser.add_argument(
        "--fleet",
        type=Path,
        default=Path(os.environ.get("YARD_FLEET_FILE", DEFAULT_FLEET_FILE)),
        help="Path to fleet seed YAML (default: $YARD_FLEET_FILE or fleet.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    board_parser = subparsers.add_parser("board", help="Show a board")
    board_parser.add_argument(
        "--facility", type=str, help="Facility id (default: all facilities merged)"
    )

    bays_parser = subparsers.add_parser("bays", help="List free bays at a facility")
    bays_parser.add_argument("facility", type=str, help="Facility id")
    bays_parser.add_argument(
        "--exclude", type=str, help="Treat this bus's own bay as free"
    )

    search_parser = subparsers.add_parser("search", help="Find buses by label or bay")
    search_parser.add_argument("query", type=str, help="Label text, bay number, or 'bay N'")
    search_parser.add_argument("--facility", type=str, help="Limit to one facility")

    move_parser = subparsers.add_parser("move", help="Move a bus to another category")
    move_parser.add_argument("bus_id", type=str, help="Bus id (e.g., 'bus-103')")
    move_parser.add_argument("to_category", choices=categories)
    move_parser.add_argument("--bay", type=int, help="Bay number for maintenance/long_term")
    move_parser.add_argument(
        "--index", type=int, help="Position in the destination list (default: bottom)"
    )

    update_parser = subparsers.add_parser("update", help="Edit a bus")
    update_parser.add_argument("bus_id", type=str, help="Bus id")
    update_parser.add_argument("--label", type=str)
    update_parser.add_argument("--status", type=str)
    update_parser.add_argument("--last-service", type=str)
    update_parser.add_argument("--notes", type=str)
    update_parser.add_argument(
        "--category", choices=categories, help="Also move the bus to this category"
    )
    update_parser.add_argument("--bay", type=int, help="Bay number when moving")

    subparsers.add_parser("summary", help="Bus counts per facility")

    return parser


def configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get("YARD_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.fleet.exists():
        print(f"Error: File not found: {args.fleet}")
        return 1

    try:
        store = load_fleet(args.fleet)
    except DepotError as e:
        print(f"Error: {e}")
        return 1

    # Dispatch to command handler
    if args.command == "board":
        return cmd_board(store, args)
    elif args.command == "bays":
        return cmd_bays(store, args)
    elif args.command == "search":
        return cmd_search(store, args)
    elif args.command == "move":
        return cmd_move(store, args)
    elif args.command == "update":
        return cmd_update(store, args)
    elif args.command == "summary":
        return cmd_summary(store, args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
