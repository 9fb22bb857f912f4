#!/usr/bin/env python3
"""Validate fleet seed YAML files against the schema and board rules."""
import sys
from pathlib import Path

import yaml
from jsonschema import ValidationError

from depot import SeedError, build_store, load_schema


def validate_fleet_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f)
        build_store(data, schema=schema)
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except SeedError as e:
        cause = e.__cause__
        if isinstance(cause, ValidationError):
            errors.append(f"Schema validation error: {cause.message}")
            if cause.path:
                errors.append(f"  at path: {'.'.join(str(p) for p in cause.path)}")
        else:
            errors.append(f"Board error: {e}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv=None):
    """Validate the given fleet files (default: fleet.yaml next to this script)."""
    paths = [Path(p) for p in (sys.argv[1:] if argv is None else argv)]
    if not paths:
        paths = [Path(__file__).parent / "fleet.yaml"]

    schema = load_schema()
    all_valid = True
    for filepath in paths:
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
