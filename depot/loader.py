"""YAML loading of fleet seed data into a BoardStore."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Union

import yaml
from jsonschema import ValidationError, validate

from .bay import bay_from_number
from .board import Board, BoardStore
from .bus import Bus
from .category import Category
from .exceptions import SeedError
from .facility import Facility

_logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"


def load_schema() -> dict:
    """Load the JSON schema for fleet seed files."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def _parse_bus(dct: Dict[str, Any]) -> Bus:
    return Bus(
        str(dct["id"]),
        dct["label"],
        dct.get("status", "--"),
        bay_from_number(dct.get("bay")),
        dct.get("lastService"),
        dct.get("notes"),
    )


def _parse_board(facility: Facility, dct: Dict[str, Any], seen_ids: Set[str]) -> Board:
    """Build one facility board, checking placement and bay invariants."""
    lists: Dict[Category, List[Bus]] = {}
    used_bays: Set[int] = set()
    for key, entries in (dct or {}).items():
        try:
            category = Category(key)
        except ValueError:
            raise SeedError(f"{facility.id}: unknown category {key!r}") from None
        buses = [_parse_bus(e) for e in entries or []]
        for bus in buses:
            if bus.id in seen_ids:
                raise SeedError(f"{facility.id}: duplicate bus id {bus.id!r}")
            seen_ids.add(bus.id)

            number = bus.bay_number
            if not category.requires_bay:
                if number is not None:
                    raise SeedError(
                        f"{facility.id}: {bus.id} has bay {number} in {key}, "
                        "which does not use bays"
                    )
                continue
            if number is None:
                raise SeedError(f"{facility.id}: {bus.id} in {key} needs a bay")
            if not facility.allows_bay(number):
                raise SeedError(
                    f"{facility.id}: {bus.id} bay {number} not in {facility.bays}"
                )
            if number in used_bays:
                raise SeedError(f"{facility.id}: bay {number} assigned twice")
            used_bays.add(number)
        lists[category] = buses
    return Board(lists)


def build_store(data: Dict[str, Any], schema: Optional[dict] = None) -> BoardStore:
    """
    Build a BoardStore from parsed seed data.

    Validates against the schema first (the packaged one unless given),
    then checks board invariants (unique bus ids, bays only in bay
    categories, bays allowed and unique). A schema failure is raised as
    SeedError chained from the jsonschema ValidationError.
    """
    try:
        validate(instance=data, schema=schema if schema is not None else load_schema())
    except ValidationError as e:
        where = ".".join(str(p) for p in e.path)
        raise SeedError(f"Schema validation error: {e.message} (at {where or 'root'})") from e

    facilities: List[Facility] = []
    boards: Dict[str, Board] = {}
    seen_ids: Set[str] = set()
    for entry in data["facilities"]:
        facility = Facility(entry["id"], entry.get("name"), entry.get("bays"))
        if facility.id in boards:
            raise SeedError(f"duplicate facility id {facility.id!r}")
        facilities.append(facility)
        boards[facility.id] = _parse_board(facility, entry.get("board"), seen_ids)

    _logger.debug(
        "loaded %d facilities, %d buses", len(facilities), len(seen_ids)
    )
    return BoardStore(facilities, boards)


def load_fleet(filename: Union[str, Path]) -> BoardStore:
    """Load a fleet seed YAML file into a fresh BoardStore."""
    with open(filename, "r") as fp:
        try:
            data = yaml.safe_load(fp)
        except yaml.YAMLError as e:
            raise SeedError(f"YAML parse error: {e}") from e
    if not isinstance(data, dict):
        raise SeedError(f"{filename}: expected a mapping at top level")
    return build_store(data)
