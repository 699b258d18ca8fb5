"""Tests for the command-line front end."""

import json

import pytest

from vfbuilder.cli import main
from vfbuilder.utils.config import resolve_state_path


@pytest.fixture
def state_file(tmp_path):
    """Path of a fresh state document."""
    return str(tmp_path / "fleet.json")


def _write_json(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


RED_ONE = {
    "name": "Red One",
    "type": "Snubfighter",
    "speed": 3,
    "defense": "2d6",
    "guns": [{"direction": "Forward", "firepower": "2d6"}],
}


def _saved_ship_id(state_file):
    with open(state_file, encoding="utf-8") as f:
        return json.load(f)["ships"][0]["id"]


class TestInfoCommands:
    """Read-only commands."""

    def test_empty_listing(self, state_file, capsys):
        """Fresh state has no ships."""
        assert main(["--state", state_file, "ships"]) == 0
        assert "No ships saved yet." in capsys.readouterr().out

    def test_rules_for_type(self, state_file, capsys):
        """Rule table for one type."""
        assert main(["--state", state_file, "rules", "Corvette"]) == 0
        out = capsys.readouterr().out
        assert "Max points:   30" in out
        assert "Snubfighter" not in out

    def test_upgrades_for_type(self, state_file, capsys):
        """Only upgrades the type may take are listed."""
        assert main(["--state", state_file, "upgrades", "Gunship"]) == 0
        out = capsys.readouterr().out
        assert "transport" in out
        assert "tractor-beam" not in out

    def test_unknown_type_is_usage_error(self, state_file):
        """argparse rejects unknown ship types."""
        with pytest.raises(SystemExit):
            main(["--state", state_file, "upgrades", "Dreadnought"])


class TestShipCommands:
    """Validating, saving and deleting ships."""

    def test_validate_legal(self, tmp_path, state_file, capsys):
        """Legal drafts pass."""
        draft = _write_json(tmp_path, "red.json", RED_ONE)
        assert main(["--state", state_file, "validate-ship", draft]) == 0
        assert "Ship is legal." in capsys.readouterr().out

    def test_validate_illegal(self, tmp_path, state_file, capsys):
        """Violations are listed."""
        draft = _write_json(tmp_path, "bad.json", {**RED_ONE, "speed": 1})
        assert main(["--state", state_file, "validate-ship", draft]) == 1
        out = capsys.readouterr().out
        assert "Ship is not legal:" in out
        assert "  - Speed must be between 2 and 3 for this type." in out

    def test_save_and_list(self, tmp_path, state_file, capsys):
        """Saved ships are persisted and listed."""
        draft = _write_json(tmp_path, "red.json", RED_ONE)
        assert main(["--state", state_file, "save-ship", draft]) == 0
        assert main(["--state", state_file, "ships"]) == 0
        out = capsys.readouterr().out
        assert "Red One - Snubfighter (9 pts)" in out

    def test_save_duplicate_rejected(self, tmp_path, state_file, capsys):
        """The second save with the same name fails."""
        draft = _write_json(tmp_path, "red.json", RED_ONE)
        main(["--state", state_file, "save-ship", draft])
        assert main(["--state", state_file, "save-ship", draft]) == 1
        assert "Ship name must be unique." in capsys.readouterr().out

    def test_delete(self, tmp_path, state_file, capsys):
        """Delete by id; unknown ids report an error."""
        draft = _write_json(tmp_path, "red.json", RED_ONE)
        main(["--state", state_file, "save-ship", draft])
        ship_id = _saved_ship_id(state_file)

        assert main(["--state", state_file, "delete-ship", ship_id]) == 0
        assert main(["--state", state_file, "delete-ship", ship_id]) == 1
        assert f"Ship not found: {ship_id}" in capsys.readouterr().out

    def test_missing_draft_file(self, tmp_path, state_file, capsys):
        """Missing input files are reported, not raised."""
        missing = str(tmp_path / "nope.json")
        assert main(["--state", state_file, "save-ship", missing]) == 1
        assert "File not found" in capsys.readouterr().out

    def test_invalid_draft_shape(self, tmp_path, state_file, capsys):
        """Schema errors are listed by field."""
        draft = _write_json(tmp_path, "bad.json", {"type": "Snubfighter"})
        assert main(["--state", state_file, "save-ship", draft]) == 1
        assert "speed" in capsys.readouterr().out


class TestSquadronCommands:
    """Squadrons and roster output."""

    def test_save_squadron_and_roster(self, tmp_path, state_file, capsys):
        """A saved squadron can be printed as a roster."""
        main(["--state", state_file, "save-ship", _write_json(tmp_path, "red.json", RED_ONE)])
        ship_id = _saved_ship_id(state_file)
        squadron = _write_json(
            tmp_path,
            "squadron.json",
            {"name": "Red Squadron", "entries": [{"shipId": ship_id, "pilotSkill": "2d8"}]},
        )

        assert main(["--state", state_file, "save-squadron", squadron]) == 0
        with open(state_file, encoding="utf-8") as f:
            squadron_id = json.load(f)["squadrons"][0]["id"]
        capsys.readouterr()

        assert main(["--state", state_file, "roster", squadron_id]) == 0
        out = capsys.readouterr().out
        assert "Total points: 12" in out
        assert "1. Red One (Snubfighter) - 12 pts (Ship: 9, Pilot: 3)" in out

    def test_rejected_squadron_shows_preview(self, tmp_path, state_file, capsys):
        """Rejected squadrons still report their point total."""
        squadron = _write_json(
            tmp_path,
            "squadron.json",
            {"name": "Ghosts", "entries": [{"shipId": "gone", "pilotSkill": "2d10"}]},
        )
        assert main(["--state", state_file, "save-squadron", squadron]) == 1
        out = capsys.readouterr().out
        assert "Squadron was not saved (5 pts):" in out
        assert "  - Squadron contains a missing ship." in out

    def test_unknown_roster(self, state_file, capsys):
        """Unknown squadron ids report an error."""
        assert main(["--state", state_file, "roster", "nope"]) == 1
        assert "Squadron not found: nope" in capsys.readouterr().out


class TestStatePath:
    """State document location."""

    def test_explicit_path_wins(self, monkeypatch, tmp_path):
        """--state overrides the environment."""
        monkeypatch.setenv("VFBUILDER_STATE", str(tmp_path / "env.json"))
        assert resolve_state_path(str(tmp_path / "arg.json")) == tmp_path / "arg.json"

    def test_environment_path(self, monkeypatch, tmp_path):
        """VFBUILDER_STATE is used when no argument is given."""
        monkeypatch.setenv("VFBUILDER_STATE", str(tmp_path / "env.json"))
        assert resolve_state_path() == tmp_path / "env.json"

    def test_default_path(self, monkeypatch):
        """Falls back to state/vfbuilder.json."""
        monkeypatch.delenv("VFBUILDER_STATE", raising=False)
        path = resolve_state_path()
        assert path.name == "vfbuilder.json"
        assert path.parent.name == "state"
