"""Shared fixtures for remote ops tests."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable

import pytest

from core.config import AppSettings
from core.domain.models import Entitlements, RemoteWorkspace

TOKEN = "abc123.atlasv1.xyz"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep env vars, .env files and the real home directory out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("TFE_REMOTE_OPS_"):
            monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def home(isolated_env: Path) -> Path:
    return isolated_env


@pytest.fixture
def project(tmp_path: Path) -> Path:
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def write_state(project: Path) -> Callable[[Any], Path]:
    def _write(data: Any) -> Path:
        state_path = project / ".terraform" / "terraform.tfstate"
        state_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(data, str):
            state_path.write_text(data, encoding="utf-8")
        else:
            state_path.write_text(json.dumps(data), encoding="utf-8")
        return state_path

    return _write


@pytest.fixture
def write_rc(home: Path) -> Callable[[str], Path]:
    def _write(content: str) -> Path:
        rc_path = home / ".terraformrc"
        rc_path.write_text(content, encoding="utf-8")
        return rc_path

    return _write


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


def remote_state(
    *,
    organization: str | None = "acme",
    workspaces: Any = None,
    hostname: str | None = None,
) -> dict[str, Any]:
    config: dict[str, Any] = {}
    if hostname is not None:
        config["hostname"] = hostname
    if organization is not None:
        config["organization"] = organization
    config["workspaces"] = workspaces if workspaces is not None else [{"name": "exact", "prefix": ""}]
    return {"version": 3, "backend": {"type": "remote", "config": config, "hash": 1234}}


def rc_content(hostname: str = "app.terraform.io", token: str = TOKEN) -> str:
    return f'credentials "{hostname}" {{\n  token = "{token}"\n}}\n'


class FakeTFEClient:
    """In-memory TFE API that records every call."""

    def __init__(self, *, entitled: bool = True, workspace_operations: bool = True) -> None:
        self.entitled = entitled
        self.workspace_operations = workspace_operations
        self.calls: list[tuple[str, ...]] = []
        self.closed = False

    def read_entitlements(self, organization: str) -> Entitlements:
        self.calls.append(("entitlements", organization))
        return Entitlements(organization=organization, operations=self.entitled)

    def read_workspace(self, organization: str, workspace: str) -> RemoteWorkspace:
        self.calls.append(("workspace", organization, workspace))
        return RemoteWorkspace(organization=organization, name=workspace, operations=self.workspace_operations)

    def close(self) -> None:
        self.closed = True
