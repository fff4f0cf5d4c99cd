"""Tests for reading the local statefile."""

from __future__ import annotations

from pathlib import Path

import pytest

from adapters.statefile import read_statefile, statefile_path
from core.config import AppSettings
from core.domain.errors import StateParseError


class TestReadStatefile:
    def test_missing_statefile_returns_none(self, project: Path) -> None:
        assert read_statefile(project) is None

    def test_parses_remote_backend(self, project: Path, write_state) -> None:
        write_state(
            {
                "backend": {
                    "type": "remote",
                    "config": {
                        "hostname": "tfe.example.com",
                        "organization": "acme",
                        "workspaces": [{"name": "", "prefix": "my-"}],
                    },
                }
            }
        )

        statefile = read_statefile(project)

        assert statefile is not None
        assert statefile.backend is not None
        assert statefile.backend.type == "remote"
        assert statefile.backend.config is not None
        assert statefile.backend.config.hostname == "tfe.example.com"
        assert statefile.backend.config.workspaces is not None
        assert statefile.backend.config.workspaces[0].prefix == "my-"

    def test_no_backend_block(self, project: Path, write_state) -> None:
        write_state({"version": 3, "serial": 1})

        statefile = read_statefile(project)

        assert statefile is not None
        assert statefile.backend is None

    def test_workspaces_object_is_normalized_to_list(self, project: Path, write_state) -> None:
        write_state(
            {
                "backend": {
                    "type": "remote",
                    "config": {"organization": "acme", "workspaces": {"name": "exact", "prefix": None}},
                }
            }
        )

        statefile = read_statefile(project)

        assert statefile is not None
        workspaces = statefile.backend.config.workspaces
        assert workspaces is not None
        assert len(workspaces) == 1
        assert workspaces[0].name == "exact"
        assert workspaces[0].prefix == ""

    def test_invalid_json_raises_parse_error(self, project: Path, write_state) -> None:
        write_state("{not json")

        with pytest.raises(StateParseError, match="parsing statefile"):
            read_statefile(project)

    def test_non_utf8_bytes_raise_parse_error(self, project: Path, write_state) -> None:
        state_path = write_state("{}")
        state_path.write_bytes(b'{"backend": "\xff\xfe"}')

        with pytest.raises(StateParseError, match="not valid UTF-8") as excinfo:
            read_statefile(project)

        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_wrong_structure_raises_parse_error(self, project: Path, write_state) -> None:
        write_state({"backend": {"type": "remote", "config": {"workspaces": "oops"}}})

        with pytest.raises(StateParseError, match="unexpected structure"):
            read_statefile(project)

    def test_custom_relative_path(self, project: Path) -> None:
        settings = AppSettings(state_file_relpath="alt/state.json")
        target = project / "alt" / "state.json"
        target.parent.mkdir()
        target.write_text('{"backend": {"type": "local"}}', encoding="utf-8")

        assert statefile_path(project, settings) == target
        statefile = read_statefile(project, settings)
        assert statefile is not None
        assert statefile.backend.type == "local"
