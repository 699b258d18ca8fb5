"""Full legality check for ship drafts.

Validation collects every broken rule instead of stopping at the first one,
so a builder can show the complete list of problems at once. Messages are
returned in a fixed order:

1. Name present
2. Name unique (case-insensitive, trimmed)
3. Speed within the type's range
4. Defense allowed for the type
5. Gun count
6. Upgrade count
7-11. Gun-list rules (see ``gun_violations``)
12. Point total
13. Upgrade eligibility for the type
"""

from typing import Iterable, Optional, Sequence

from ..models.dice import DiceValue, GunDirection, ShipType
from ..models.gun import Gun
from ..models.ship import Ship, ShipDraft
from ..rules.ship_rules import ShipRules, get_rules
from ..utils.constants import TAILGUNNER_KEY
from .scoring import ship_points

# Per-type cap on the strongest firepower; other guns must be weaker.
SECONDARY_FIREPOWER_CAPS: dict[ShipType, tuple[DiceValue, int, str]] = {
    ShipType.SNUBFIGHTER: (
        DiceValue.D8,
        1,
        "Snubfighters can only have one 2d8 gun; other guns must be 2d6.",
    ),
    ShipType.GUNSHIP: (
        DiceValue.D10,
        1,
        "Gunships can only have one 2d10 gun; others must be 2d6 or 2d8.",
    ),
}


def _normalize_name(name: str) -> str:
    return name.strip().lower()


def gun_violations(guns: Sequence[Gun], rules: ShipRules, has_tailgunner: bool) -> list[str]:
    """Check the direction and firepower rules for a list of guns.

    Shared by the ship validator and the incremental gun check so that the
    two can never disagree.

    Args:
        guns: Guns in insertion order
        rules: Rules of the ship type
        has_tailgunner: Whether the ship carries the tailgunner upgrade

    Returns:
        List of violation messages (empty if legal)
    """
    issues = []

    if rules.first_gun_must_be_forward and guns:
        if guns[0].direction != GunDirection.FORWARD:
            issues.append("First gun must be forward for this ship type.")

    forward_count = sum(1 for gun in guns if gun.direction == GunDirection.FORWARD)
    rear_count = sum(1 for gun in guns if gun.direction == GunDirection.REAR)

    if forward_count > 1:
        issues.append("Only one forward gun is allowed.")
    if rear_count > 1:
        issues.append("Only one rear gun is allowed.")
    if rear_count > 0 and not has_tailgunner:
        issues.append("Rear guns require the Tailgunner upgrade.")

    if any(gun.firepower not in rules.allowed_firepower for gun in guns):
        issues.append("One or more guns use firepower not allowed for this ship type.")

    issues.extend(firepower_cap_violations(guns, rules.type))
    return issues


def firepower_cap_violations(guns: Iterable[Gun], ship_type: ShipType) -> list[str]:
    """Check the per-type limit on the number of top-firepower guns."""
    cap = SECONDARY_FIREPOWER_CAPS.get(ship_type)
    if cap is None:
        return []
    firepower, limit, message = cap
    count = sum(1 for gun in guns if gun.firepower == firepower)
    return [message] if count > limit else []


def validate_ship(
    draft: ShipDraft,
    existing_ships: Iterable[Ship],
    editing_id: Optional[str] = None,
) -> list[str]:
    """Validate a ship draft against the rule table.

    Args:
        draft: Candidate ship configuration
        existing_ships: All saved ships (for name uniqueness)
        editing_id: Id of the ship being edited, excluded from the
            uniqueness check

    Returns:
        Ordered list of violation messages (empty if the draft is legal)
    """
    rules = get_rules(draft.type)
    issues = []

    normalized = _normalize_name(draft.name)
    if not normalized:
        issues.append("Ship name is required.")
    else:
        duplicate = any(
            ship.id != editing_id and _normalize_name(ship.name) == normalized
            for ship in existing_ships
        )
        if duplicate:
            issues.append("Ship name must be unique.")

    if not rules.speed_allowed(draft.speed):
        low, high = rules.speed_range
        issues.append(f"Speed must be between {low} and {high} for this type.")

    if draft.defense not in rules.allowed_defense:
        issues.append("Selected defense is not allowed for this ship type.")

    if len(draft.guns) > rules.max_guns:
        issues.append(f"Maximum guns for this type is {rules.max_guns}.")

    if len(draft.upgrades) > rules.max_upgrades:
        issues.append(f"Maximum upgrades for this type is {rules.max_upgrades}.")

    issues.extend(gun_violations(draft.guns, rules, draft.has_upgrade(TAILGUNNER_KEY)))

    points = ship_points(draft)
    if points > rules.max_points:
        issues.append(f"Ship exceeds max points ({points}/{rules.max_points}).")

    for upgrade in draft.upgrades:
        if not upgrade.allows(draft.type):
            issues.append(f'Upgrade "{upgrade.name}" is not available for {draft.type.value}.')

    return issues
