"""Fleet state conversion to/from JSON-compatible dictionaries.

Field names follow the stored document layout (camelCase), so documents
written by earlier builds of the tool load unchanged.
"""

from typing import Any

from ..engine.scoring import gun_points
from ..models.gun import Gun
from ..models.ship import Ship
from ..models.squadron import Squadron, SquadronEntry
from ..models.state import FleetState
from ..models.upgrade import Upgrade
from .constants import STATE_VERSION


def state_to_dict(state: FleetState) -> dict[str, Any]:
    """Convert fleet state to a JSON-compatible dictionary.

    Args:
        state: Fleet state to serialize

    Returns:
        Dictionary with ``ships``, ``squadrons`` and ``version``
    """
    return {
        "ships": [ship_to_dict(ship) for ship in state.ships],
        "squadrons": [squadron_to_dict(squadron) for squadron in state.squadrons],
        "version": state.version,
    }


def state_from_dict(data: dict[str, Any]) -> FleetState:
    """Reconstruct fleet state from a dictionary.

    Args:
        data: Dictionary representation of fleet state

    Returns:
        Reconstructed FleetState

    Raises:
        KeyError: If a record is missing a required field
        ValueError: If a record holds an invalid enum value or empty id
        TypeError: If a record is not a dictionary
    """
    return FleetState(
        ships=[ship_from_dict(s) for s in data["ships"]],
        squadrons=[squadron_from_dict(s) for s in data["squadrons"]],
        version=data.get("version", STATE_VERSION),
    )


def ship_to_dict(ship: Ship) -> dict[str, Any]:
    """Convert Ship to dictionary."""
    return {
        "id": ship.id,
        "name": ship.name,
        "type": ship.type.value,
        "speed": ship.speed,
        "defense": ship.defense.value,
        "guns": [_serialize_gun(gun) for gun in ship.guns],
        "upgrades": [_serialize_upgrade(upgrade) for upgrade in ship.upgrades],
        "points": ship.points,
        "createdAt": ship.created_at,
        "updatedAt": ship.updated_at,
    }


def ship_from_dict(data: dict[str, Any]) -> Ship:
    """Reconstruct Ship from dictionary."""
    return Ship(
        id=data["id"],
        name=data["name"],
        type=data["type"],
        speed=data["speed"],
        defense=data["defense"],
        guns=[_deserialize_gun(g) for g in data.get("guns", [])],
        upgrades=[_deserialize_upgrade(u) for u in data.get("upgrades", [])],
        points=data.get("points", 0),
        created_at=data.get("createdAt", ""),
        updated_at=data.get("updatedAt", ""),
    )


def squadron_to_dict(squadron: Squadron) -> dict[str, Any]:
    """Convert Squadron to dictionary."""
    return {
        "id": squadron.id,
        "name": squadron.name,
        "entries": [_serialize_entry(entry) for entry in squadron.entries],
        "points": squadron.points,
        "createdAt": squadron.created_at,
        "updatedAt": squadron.updated_at,
    }


def squadron_from_dict(data: dict[str, Any]) -> Squadron:
    """Reconstruct Squadron from dictionary."""
    return Squadron(
        id=data["id"],
        name=data["name"],
        entries=[_deserialize_entry(e) for e in data.get("entries", [])],
        points=data.get("points", 0),
        created_at=data.get("createdAt", ""),
        updated_at=data.get("updatedAt", ""),
    )


def _serialize_gun(gun: Gun) -> dict[str, Any]:
    return {
        "id": gun.id,
        "direction": gun.direction.value,
        "firepower": gun.firepower.value,
        "points": gun_points(gun.firepower),
    }


def _deserialize_gun(data: dict[str, Any]) -> Gun:
    # Stored points are ignored; cost is always derived from firepower.
    return Gun(id=data["id"], direction=data["direction"], firepower=data["firepower"])


def _serialize_upgrade(upgrade: Upgrade) -> dict[str, Any]:
    data = {
        "id": upgrade.id,
        "key": upgrade.key,
        "name": upgrade.name,
        "allowedShipTypes": [ship_type.value for ship_type in upgrade.allowed_ship_types],
        "rarity": upgrade.rarity.value,
        "rulesText": upgrade.rules_text,
    }
    if upgrade.stat_modifier is not None:
        data["statModifier"] = upgrade.stat_modifier.value
    if upgrade.data is not None:
        data["data"] = upgrade.data
    return data


def _deserialize_upgrade(data: dict[str, Any]) -> Upgrade:
    return Upgrade(
        id=data["id"],
        key=data["key"],
        name=data["name"],
        allowed_ship_types=data.get("allowedShipTypes", []),
        rarity=data["rarity"],
        rules_text=data.get("rulesText", ""),
        stat_modifier=data.get("statModifier"),
        data=data.get("data"),
    )


def _serialize_entry(entry: SquadronEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "shipId": entry.ship_id,
        "pilotSkill": entry.pilot_skill.value,
        "pilotPoints": entry.pilot_points,
    }


def _deserialize_entry(data: dict[str, Any]) -> SquadronEntry:
    return SquadronEntry(
        id=data["id"],
        ship_id=data["shipId"],
        pilot_skill=data["pilotSkill"],
        pilot_points=data.get("pilotPoints", 0),
    )
