"""Point-cost formulas.

All functions are total: unknown dice values or speeds score 0 rather than
raising, and every function can be called on drafts that fail validation.
"""

from typing import Iterable, Mapping

from ..models.ship import Ship, ShipDraft
from ..models.squadron import SquadronEntry
from ..models.upgrade import Upgrade
from ..rules.ship_rules import DEFENSE_POINTS, FIREPOWER_POINTS, PILOT_POINTS, SPEED_POINTS


def gun_points(firepower) -> int:
    """Point cost of a gun: 2d6=2, 2d8=4, 2d10=6."""
    return FIREPOWER_POINTS.get(firepower, 0)


def defense_points(defense) -> int:
    """Point cost of a defense rating: 2d6=2, 2d8=4, 2d10=6."""
    return DEFENSE_POINTS.get(defense, 0)


def speed_points(speed) -> int:
    """Point cost of a speed rating: 1=1, 2=3, 3=5."""
    return SPEED_POINTS.get(speed, 0)


def upgrade_points(upgrades: Iterable[Upgrade]) -> int:
    """Flat 1 point per upgrade; rarity does not affect cost."""
    return sum(1 for _ in upgrades)


def ship_points(draft: ShipDraft | Ship) -> int:
    """Total point cost of a ship or ship draft.

    speed + defense + sum of gun costs + one point per upgrade.

    Args:
        draft: Ship draft (or saved ship) to score

    Returns:
        Point total
    """
    return (
        speed_points(draft.speed)
        + defense_points(draft.defense)
        + sum(gun_points(gun.firepower) for gun in draft.guns)
        + upgrade_points(draft.upgrades)
    )


def pilot_points(skill) -> int:
    """Point cost of a pilot: 2d6=1, 2d8=3, 2d10=5."""
    return PILOT_POINTS.get(skill, 0)


def index_ships(ships: Mapping[str, Ship] | Iterable[Ship]) -> Mapping[str, Ship]:
    """Build an id -> ship lookup from a mapping or any iterable of ships."""
    if isinstance(ships, Mapping):
        return ships
    return {ship.id: ship for ship in ships}


def squadron_points(
    entries: Iterable[SquadronEntry], ships: Mapping[str, Ship] | Iterable[Ship]
) -> int:
    """Total point cost of a squadron.

    Each entry contributes its referenced ship's saved points (0 if the ship
    no longer exists) plus its pilot cost. Pilot cost is always derived from
    the entry's pilot skill, so entries of a missing ship still count their
    pilot.

    Args:
        entries: Squadron entries (saved or draft)
        ships: Ships keyed by id, or any iterable of ships

    Returns:
        Point total
    """
    lookup = index_ships(ships)
    total = 0
    for entry in entries:
        ship = lookup.get(entry.ship_id)
        total += ship.points if ship is not None else 0
        total += pilot_points(entry.pilot_skill)
    return total
