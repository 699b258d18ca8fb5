"""Single-gun legality check used while building a ship.

The builder adds guns one at a time. ``can_add_gun`` evaluates the same
gun-list rules as the full ship validator against the hypothetical list
(current guns plus the candidate), plus a capacity check.
"""

from dataclasses import replace
from typing import Sequence

from ..models.dice import DiceValue, GunDirection, ShipType, coerce_enum
from ..models.gun import Gun
from ..models.ship import ShipDraft
from ..rules.ship_rules import get_rules
from ..utils.constants import TAILGUNNER_KEY
from .ship_validator import gun_violations


def can_add_gun(
    current_guns: Sequence[Gun],
    direction: GunDirection | str,
    firepower: DiceValue | str,
    ship_type: ShipType | str,
    has_tailgunner: bool,
) -> list[str]:
    """Check whether one more gun may be added.

    Args:
        current_guns: Guns already on the draft, in insertion order
        direction: Direction of the candidate gun
        firepower: Firepower of the candidate gun
        ship_type: Type of the ship being built
        has_tailgunner: Whether the draft carries the tailgunner upgrade

    Returns:
        Ordered list of violation messages (empty if the gun may be added)
    """
    rules = get_rules(ship_type)
    issues = []

    if len(current_guns) >= rules.max_guns:
        issues.append(f"Cannot exceed {rules.max_guns} guns.")

    candidate = Gun(direction=direction, firepower=firepower, id="candidate")
    issues.extend(gun_violations([*current_guns, candidate], rules, has_tailgunner))
    return issues


def allowed_directions(
    current_guns: Sequence[Gun], ship_type: ShipType | str, has_tailgunner: bool
) -> list[GunDirection]:
    """Directions the builder should offer for the next gun.

    Args:
        current_guns: Guns already on the draft
        ship_type: Type of the ship being built
        has_tailgunner: Whether the draft carries the tailgunner upgrade

    Returns:
        Offered directions (empty when the gun cap is reached)
    """
    rules = get_rules(ship_type)
    if len(current_guns) >= rules.max_guns:
        return []
    if rules.first_gun_must_be_forward and not current_guns:
        return [GunDirection.FORWARD]

    directions = [GunDirection.TURRET]
    if not any(gun.direction == GunDirection.FORWARD for gun in current_guns):
        directions.insert(0, GunDirection.FORWARD)
    if has_tailgunner and not any(gun.direction == GunDirection.REAR for gun in current_guns):
        directions.append(GunDirection.REAR)
    return directions


def add_gun(
    draft: ShipDraft, direction: GunDirection | str, firepower: DiceValue | str
) -> tuple[ShipDraft, list[str]]:
    """Append a gun to a draft if the incremental check allows it.

    Returns:
        Tuple of (new draft with the gun appended, or the unchanged draft
        when rejected; list of violation messages)
    """
    issues = can_add_gun(
        draft.guns, direction, firepower, draft.type, draft.has_upgrade(TAILGUNNER_KEY)
    )
    if issues:
        return draft, issues
    gun = Gun(
        direction=coerce_enum(GunDirection, direction, "direction"),
        firepower=coerce_enum(DiceValue, firepower, "firepower"),
    )
    return replace(draft, guns=[*draft.guns, gun]), []


def remove_gun(draft: ShipDraft, gun_id: str) -> ShipDraft:
    """Return a copy of the draft without the gun with the given id."""
    return replace(draft, guns=[gun for gun in draft.guns if gun.id != gun_id])
