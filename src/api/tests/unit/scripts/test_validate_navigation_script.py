"""Unit tests for the validate_navigation script."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[5] / "scripts" / "validate_navigation.py"


@pytest.fixture(scope="module")
def script():
    spec = importlib.util.spec_from_file_location("validate_navigation", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def write(tmp_path: Path, data) -> Path:
    path = tmp_path / "navigation.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestValidateNavigationScript:
    """Tests for exit codes of the script."""

    def test_built_in_sidebar_is_clean(self, script):
        assert script.main([]) == 0

    def test_role_report(self, script, capsys):
        assert script.main(["--role", "admin"]) == 0
        assert "Role 'admin' sees" in capsys.readouterr().out

    def test_violations_exit_1(self, script, tmp_path):
        path = write(
            tmp_path,
            {
                "sections": [
                    {
                        "id": "s",
                        "title": "S",
                        "type": "section",
                        "children": [{"id": "l", "title": "L", "type": "link"}],
                    }
                ]
            },
        )
        assert script.main([str(path)]) == 1

    def test_unreadable_config_exit_2(self, script, tmp_path):
        assert script.main([str(tmp_path / "missing.json")]) == 2
