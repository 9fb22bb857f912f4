#!/usr/bin/env python3
"""Tests for validate_yaml."""

from depot import load_schema
from depot import loader as depot_loader
from validate_yaml import main, validate_fleet_file


class TestValidateFleetFile:
    """Tests for validate_fleet_file."""

    def test_valid_returns_no_errors(self, tmp_path):
        path = tmp_path / "valid.yaml"
        path.write_text("""
facilities:
  - id: North
    bays: [1, 2]
    board:
      maintenance:
        - {id: bus-1, label: Bus 1, bay: 1}
""")
        assert validate_fleet_file(path, load_schema()) == []

    def test_schema_error_reports_path(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("""
facilities:
  - id: North
    bays: [0]
""")
        errors = validate_fleet_file(path, load_schema())
        assert any("Schema validation" in e for e in errors)
        assert any("at path" in e for e in errors)

    def test_board_rule_error(self, tmp_path):
        path = tmp_path / "taken.yaml"
        path.write_text("""
facilities:
  - id: North
    bays: [1, 2]
    board:
      maintenance:
        - {id: bus-1, label: Bus 1, bay: 1}
        - {id: bus-2, label: Bus 2, bay: 1}
""")
        errors = validate_fleet_file(path, load_schema())
        assert len(errors) == 1
        assert errors[0].startswith("Board error")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("facilities: [unclosed\n")
        errors = validate_fleet_file(path, load_schema())
        assert any("YAML" in e for e in errors)

    def test_nonexistent_file(self, tmp_path):
        errors = validate_fleet_file(tmp_path / "missing.yaml", load_schema())
        assert len(errors) == 1
        assert errors[0].startswith("Error")


class TestMain:
    def test_reference_fleet_is_valid(self, capsys):
        assert main([]) == 0
        assert "OK: fleet.yaml" in capsys.readouterr().out

    def test_failure_exit_code(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("facilities: 3\n")
        assert main([str(path)]) == 1
        assert "FAIL: bad.yaml" in capsys.readouterr().out


class TestSingleSchemaPass:
    def test_schema_passed_through_to_build_store(self, tmp_path, monkeypatch):
        def fail_load_schema():
            raise AssertionError("schema should not be reloaded")

        monkeypatch.setattr(depot_loader, "load_schema", fail_load_schema)
        path = tmp_path / "fleet.yaml"
        path.write_text("facilities:\n  - id: North\n")
        assert validate_fleet_file(path, load_schema()) == []
