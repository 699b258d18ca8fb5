"""Command-line front end for the fleet builder."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from .app.controller import FleetController
from .app.roster import render_roster, render_ship_line
from .models.dice import ShipType
from .rules.catalog import allowed_upgrades
from .rules.ship_rules import SHIP_RULES, get_rules
from .schemas.drafts import ShipDraftRequest, SquadronDraftRequest
from .utils.config import configure_logging, resolve_state_path
from .utils.storage import JsonFileStorage

logger = logging.getLogger(__name__)


def _read_json(path: str):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _print_errors(errors: list[str]) -> None:
    for error in errors:
        print(f"  - {error}")


def _format_rules(ship_type: ShipType) -> str:
    rules = get_rules(ship_type)
    low, high = rules.speed_range
    return "\n".join(
        [
            f"{rules.type.value}",
            f"  Max points:   {rules.max_points}",
            f"  Max guns:     {rules.max_guns}",
            f"  Max upgrades: {rules.max_upgrades}",
            f"  Speed:        {low}-{high}",
            f"  Forward first gun: {'yes' if rules.first_gun_must_be_forward else 'no'}",
            f"  Defense:      {', '.join(d.value for d in rules.allowed_defense)}",
            f"  Firepower:    {', '.join(d.value for d in rules.allowed_firepower)}",
            f"  Pilot skills: {', '.join(d.value for d in rules.allowed_pilot_skills)}",
        ]
    )


def cmd_ships(controller: FleetController, args) -> int:
    if not controller.state.ships:
        print("No ships saved yet.")
    for ship in controller.state.ships:
        print(f"{ship.id}  {render_ship_line(ship)}")
    return 0


def cmd_squadrons(controller: FleetController, args) -> int:
    if not controller.state.squadrons:
        print("No squadrons saved yet.")
    for squadron in controller.state.squadrons:
        print(
            f"{squadron.id}  {squadron.name} - {len(squadron.entries)} ships, "
            f"{squadron.points} pts"
        )
    return 0


def cmd_rules(controller: FleetController, args) -> int:
    types = [ShipType(args.type)] if args.type else list(SHIP_RULES)
    print("\n\n".join(_format_rules(ship_type) for ship_type in types))
    return 0


def cmd_upgrades(controller: FleetController, args) -> int:
    for definition in allowed_upgrades(args.type):
        print(f"{definition.key:<22} {definition.name:<22} {definition.rarity.value}")
    return 0


def cmd_validate_ship(controller: FleetController, args) -> int:
    draft = ShipDraftRequest.model_validate(_read_json(args.file)).to_draft()
    errors = controller.validate_ship(draft, args.id)
    if errors:
        print("Ship is not legal:")
        _print_errors(errors)
        return 1
    print("Ship is legal.")
    return 0


def cmd_save_ship(controller: FleetController, args) -> int:
    draft = ShipDraftRequest.model_validate(_read_json(args.file)).to_draft()
    result = controller.save_ship(draft, args.id)
    if not result.accepted:
        print("Ship was not saved:")
        _print_errors(result.errors)
        return 1
    print(f"Saved {result.record.id}  {render_ship_line(result.record)}")
    return 0


def cmd_delete_ship(controller: FleetController, args) -> int:
    if not controller.delete_ship(args.id):
        print(f"Ship not found: {args.id}")
        return 1
    print(f"Deleted ship {args.id}")
    return 0


def cmd_save_squadron(controller: FleetController, args) -> int:
    draft = SquadronDraftRequest.model_validate(_read_json(args.file)).to_draft()
    result = controller.save_squadron(draft, args.id)
    if not result.accepted:
        print(f"Squadron was not saved ({controller.preview_squadron_points(draft)} pts):")
        _print_errors(result.errors)
        return 1
    print(f"Saved {result.record.id}  {result.record.name} ({result.record.points} pts)")
    return 0


def cmd_delete_squadron(controller: FleetController, args) -> int:
    if not controller.delete_squadron(args.id):
        print(f"Squadron not found: {args.id}")
        return 1
    print(f"Deleted squadron {args.id}")
    return 0


def cmd_roster(controller: FleetController, args) -> int:
    squadron = controller.state.get_squadron(args.id)
    if squadron is None:
        print(f"Squadron not found: {args.id}")
        return 1
    print(render_roster(squadron, controller.state.ship_index()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vfbuilder",
        description="VFBuilder - design ships, assemble squadrons, and track points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s rules Snubfighter             # Show the rule table for one type
  %(prog)s upgrades Gunship              # Upgrades a Gunship may take
  %(prog)s save-ship red-one.json        # Validate and save a ship draft
  %(prog)s save-squadron red.json        # Validate and save a squadron draft
  %(prog)s roster <squadron-id>          # Print a roster sheet
        """,
    )
    parser.add_argument(
        "--state",
        type=str,
        default=None,
        metavar="PATH",
        help="State document (default: $VFBUILDER_STATE or state/vfbuilder.json)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    type_choices = [ship_type.value for ship_type in ShipType]

    sub.add_parser("ships", help="List saved ships").set_defaults(func=cmd_ships)
    sub.add_parser("squadrons", help="List saved squadrons").set_defaults(func=cmd_squadrons)

    rules = sub.add_parser("rules", help="Show the rule table")
    rules.add_argument("type", nargs="?", choices=type_choices)
    rules.set_defaults(func=cmd_rules)

    upgrades = sub.add_parser("upgrades", help="List upgrades allowed for a ship type")
    upgrades.add_argument("type", choices=type_choices)
    upgrades.set_defaults(func=cmd_upgrades)

    validate = sub.add_parser("validate-ship", help="Check a ship draft without saving")
    validate.add_argument("file", help="Ship draft JSON file")
    validate.add_argument("--id", default=None, help="Id of the ship being edited")
    validate.set_defaults(func=cmd_validate_ship)

    save_ship = sub.add_parser("save-ship", help="Validate and save a ship draft")
    save_ship.add_argument("file", help="Ship draft JSON file")
    save_ship.add_argument("--id", default=None, help="Id of the ship being edited")
    save_ship.set_defaults(func=cmd_save_ship)

    delete_ship = sub.add_parser("delete-ship", help="Delete a ship")
    delete_ship.add_argument("id")
    delete_ship.set_defaults(func=cmd_delete_ship)

    save_squadron = sub.add_parser("save-squadron", help="Validate and save a squadron draft")
    save_squadron.add_argument("file", help="Squadron draft JSON file")
    save_squadron.add_argument("--id", default=None, help="Id of the squadron being edited")
    save_squadron.set_defaults(func=cmd_save_squadron)

    delete_squadron = sub.add_parser("delete-squadron", help="Delete a squadron")
    delete_squadron.add_argument("id")
    delete_squadron.set_defaults(func=cmd_delete_squadron)

    roster = sub.add_parser("roster", help="Print a squadron roster sheet")
    roster.add_argument("id")
    roster.set_defaults(func=cmd_roster)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    state_path = resolve_state_path(args.state)
    logger.debug(f"Using state document {state_path}")
    controller = FleetController(storage=JsonFileStorage(state_path))

    try:
        return args.func(controller, args)
    except FileNotFoundError as e:
        print(f"File not found: {e.filename}")
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in draft file: {e}")
        return 1
    except ValidationError as e:
        print(f"Invalid draft ({e.error_count()} errors):")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            print(f"  - {location}: {error['msg']}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
