"""Squadron legality check: pilot skills and squadron-wide rarity caps."""

from collections import Counter
from typing import Iterable, Mapping

from ..models.dice import DiceValue, Rarity
from ..models.ship import Ship
from ..models.squadron import SquadronDraft
from ..rules.ship_rules import get_rules
from ..utils.constants import RARE_SHIP_LIMIT, UNCOMMON_SHIP_LIMIT
from .scoring import index_ships


def pilot_skill_options(ship: Ship | None) -> list[DiceValue]:
    """Pilot skills allowed for a ship (empty if the ship is missing)."""
    if ship is None:
        return []
    return list(get_rules(ship.type).allowed_pilot_skills)


def rarity_counts(ships: Iterable[Ship]) -> tuple[Counter, Counter]:
    """Count ships carrying each Uncommon and Rare upgrade key.

    A key counts once per ship even if the ship somehow carries several
    instances of it. Counters keep first-seen key order.

    Args:
        ships: Ships of the squadron, one per entry

    Returns:
        Tuple of (uncommon counts, rare counts) keyed by catalog key
    """
    uncommon = Counter()
    rare = Counter()
    for ship in ships:
        seen_uncommon = set()
        seen_rare = set()
        for upgrade in ship.upgrades:
            if upgrade.rarity == Rarity.UNCOMMON and upgrade.key not in seen_uncommon:
                seen_uncommon.add(upgrade.key)
                uncommon[upgrade.key] += 1
            elif upgrade.rarity == Rarity.RARE and upgrade.key not in seen_rare:
                seen_rare.add(upgrade.key)
                rare[upgrade.key] += 1
    return uncommon, rare


def validate_squadron(
    draft: SquadronDraft, all_ships: Mapping[str, Ship] | Iterable[Ship]
) -> list[str]:
    """Validate a squadron draft.

    Args:
        draft: Candidate squadron
        all_ships: All saved ships, keyed by id or as an iterable

    Returns:
        Ordered list of violation messages (empty if the draft is legal)
    """
    lookup = index_ships(all_ships)
    issues = []

    if not draft.name.strip():
        issues.append("Squadron name is required.")

    if not draft.entries:
        issues.append("Add at least one ship to the squadron.")

    squadron_ships = []
    for entry in draft.entries:
        ship = lookup.get(entry.ship_id)
        if ship is None:
            issues.append("Squadron contains a missing ship.")
            continue
        squadron_ships.append(ship)
        if entry.pilot_skill not in get_rules(ship.type).allowed_pilot_skills:
            issues.append(f"Pilot skill not allowed for {ship.name}.")

    uncommon, rare = rarity_counts(squadron_ships)
    for key, count in uncommon.items():
        if count > UNCOMMON_SHIP_LIMIT:
            issues.append(
                f'Uncommon upgrade "{key}" exceeds max of {UNCOMMON_SHIP_LIMIT} ships.'
            )
    for key, count in rare.items():
        if count > RARE_SHIP_LIMIT:
            issues.append(f'Rare upgrade "{key}" exceeds max of {RARE_SHIP_LIMIT} ship.')

    return issues
