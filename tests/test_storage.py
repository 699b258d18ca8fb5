"""Tests for JSON file persistence."""

import json
import logging

import pytest

from vfbuilder.models import FleetState, Gun, Ship, Squadron, SquadronEntry
from vfbuilder.utils.storage import JsonFileStorage


@pytest.fixture
def storage(tmp_path):
    """Storage pointed at a fresh temporary file."""
    return JsonFileStorage(tmp_path / "state" / "vfbuilder.json")


def _write(storage, text):
    storage.path.parent.mkdir(parents=True, exist_ok=True)
    storage.path.write_text(text, encoding="utf-8")


class TestLoadFallback:
    """Anything unreadable loads as the empty default."""

    def test_missing_file(self, storage):
        """No document yet."""
        state = storage.load()
        assert state == FleetState()

    def test_blank_file(self, storage):
        """Whitespace-only document."""
        _write(storage, "   \n")
        assert storage.load() == FleetState()

    def test_garbage(self, storage, caplog):
        """Unparseable JSON is logged and replaced."""
        _write(storage, "{not json")
        with caplog.at_level(logging.WARNING):
            assert storage.load() == FleetState()
        assert "not valid JSON" in caplog.text

    def test_not_an_object(self, storage):
        """A JSON list is not a state document."""
        _write(storage, "[1, 2, 3]")
        assert storage.load() == FleetState()

    def test_missing_squadrons(self, storage):
        """Both collections are required."""
        _write(storage, json.dumps({"ships": []}))
        assert storage.load() == FleetState()

    def test_ships_not_a_list(self, storage):
        """Collections must be lists of objects."""
        _write(storage, json.dumps({"ships": "none", "squadrons": []}))
        assert storage.load() == FleetState()

    def test_malformed_record(self, storage, caplog):
        """A record with a bad enum value discards the document."""
        ship = {"id": "s1", "name": "X", "type": "Dreadnought", "speed": 1, "defense": "2d8"}
        _write(storage, json.dumps({"ships": [ship], "squadrons": []}))
        with caplog.at_level(logging.WARNING):
            assert storage.load() == FleetState()
        assert "malformed records" in caplog.text

    def test_record_missing_field(self, storage):
        """A record without an id discards the document."""
        _write(storage, json.dumps({"ships": [{"name": "X"}], "squadrons": []}))
        assert storage.load() == FleetState()


class TestLoadValid:
    """Well-formed documents."""

    def test_version_defaults_to_one(self, storage):
        """A document without a version still loads."""
        _write(storage, json.dumps({"ships": [], "squadrons": []}))
        state = storage.load()
        assert state.version == 1

    @pytest.mark.parametrize("version", [None, "one", 1.5, True, [1]])
    def test_unusable_version_keeps_fleet(self, storage, version):
        """A bad version falls back to 1 instead of discarding the ships."""
        ship = {"id": "s1", "name": "Lancer", "type": "Gunship", "speed": 1, "defense": "2d8"}
        _write(storage, json.dumps({"ships": [ship], "squadrons": [], "version": version}))

        state = storage.load()

        assert [s.id for s in state.ships] == ["s1"]
        assert state.version == 1

    def test_newer_version_kept(self, storage):
        """Integer versions are kept as stored."""
        _write(storage, json.dumps({"ships": [], "squadrons": [], "version": 3}))
        assert storage.load().version == 3

    def test_extra_keys_ignored(self, storage):
        """Unknown top-level keys do not break loading."""
        _write(storage, json.dumps({"ships": [], "squadrons": [], "theme": "dark"}))
        assert storage.load() == FleetState()

    def test_parse_document_directly(self, storage):
        """Already-decoded documents go through the same checks."""
        assert storage.parse_document("nope") == FleetState()
        assert storage.parse_document({"ships": [], "squadrons": [], "version": 1}) == FleetState()


class TestSave:
    """Writing the document."""

    def test_round_trip(self, storage):
        """Saved state loads back equal."""
        ship = Ship(
            id="s1",
            name="Lancer",
            type="Gunship",
            speed=1,
            defense="2d8",
            guns=[Gun("Turret", "2d10", id="g1")],
            points=11,
        )
        squadron = Squadron(
            id="q1",
            name="Blue",
            entries=[SquadronEntry("s1", "2d6", pilot_points=1, id="e1")],
            points=12,
        )
        state = FleetState(ships=[ship], squadrons=[squadron])

        storage.save(state)

        assert storage.path.exists()
        assert storage.load() == state

    def test_creates_parent_directories(self, tmp_path):
        """Nested directories are created on save."""
        storage = JsonFileStorage(tmp_path / "a" / "b" / "state.json")
        storage.save(FleetState())
        assert json.loads(storage.path.read_text()) == {
            "ships": [],
            "squadrons": [],
            "version": 1,
        }

    def test_overwrites_whole_document(self, storage):
        """Each save replaces the previous document."""
        storage.save(
            FleetState(ships=[Ship(id="s1", name="A", type="Gunship", speed=1, defense="2d8")])
        )
        storage.save(FleetState())
        assert storage.load().ships == []
