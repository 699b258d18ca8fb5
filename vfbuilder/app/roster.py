"""Plain-text roster sheet for a squadron."""

from typing import Iterable, Mapping

from ..engine.scoring import index_ships, pilot_points
from ..models.dice import Rarity
from ..models.ship import Ship
from ..models.squadron import Squadron

_RARITY_ORDER = {Rarity.RARE: 0, Rarity.UNCOMMON: 1, Rarity.COMMON: 2}


def _dice(value) -> str:
    return str(value).upper()


def weapons_line(ship: Ship) -> str:
    """Comma-separated guns, e.g. 'Forward 2D6, Turret 2D8'."""
    if not ship.guns:
        return "None"
    return ", ".join(f"{gun.direction.value} {_dice(gun.firepower)}" for gun in ship.guns)


def upgrades_line(ship: Ship) -> str:
    """Upgrades ordered Rare, Uncommon, Common with a rarity initial."""
    if not ship.upgrades:
        return "None"
    ordered = sorted(ship.upgrades, key=lambda upgrade: _RARITY_ORDER[upgrade.rarity])
    return ", ".join(f"{upgrade.name} ({upgrade.rarity.value[0]})" for upgrade in ordered)


def render_ship_line(ship: Ship) -> str:
    """One-line ship summary used in listings."""
    return (
        f"{ship.name} - {ship.type.value} ({ship.points} pts) "
        f"Speed: {ship.speed} Defence: {_dice(ship.defense)} [{weapons_line(ship)}]"
    )


def render_roster(squadron: Squadron, ships: Mapping[str, Ship] | Iterable[Ship]) -> str:
    """Render a squadron roster sheet.

    Entries whose ship has been deleted are listed as 'Missing ship' and
    count only their pilot points.

    Args:
        squadron: Saved squadron to print
        ships: All saved ships, keyed by id or as an iterable

    Returns:
        Multi-line roster text
    """
    lookup = index_ships(ships)
    lines = [squadron.name, f"Total points: {squadron.points}", ""]

    for number, entry in enumerate(squadron.entries, start=1):
        ship = lookup.get(entry.ship_id)
        pilot = pilot_points(entry.pilot_skill)
        if ship is None:
            lines.append(f"{number}. Missing ship (Unknown type) - {pilot} pts")
            lines.append(f"   Pilot: {_dice(entry.pilot_skill)}")
            continue

        lines.append(
            f"{number}. {ship.name} ({ship.type.value}) - {ship.points + pilot} pts "
            f"(Ship: {ship.points}, Pilot: {pilot})"
        )
        lines.append(
            f"   Speed: {ship.speed}  Defence: {_dice(ship.defense)}  "
            f"Pilot: {_dice(entry.pilot_skill)}"
        )
        lines.append(f"   Weapons: {weapons_line(ship)}")
        lines.append(f"   Upgrades: {upgrades_line(ship)}")

    return "\n".join(lines)
