#!/usr/bin/env python3
"""Headless Robot Battle driver.

Plays one match by feeding abstract inputs to the engine and prints the
battle log. Useful for balancing the catalog without a presentation layer.
"""

import argparse

from robobattle.core.config import load_match_config
from robobattle.core.data import SELECTION_ORDER, EquipmentId
from robobattle.core.engine import MatchPhase
from robobattle.core.events import EventManager
from robobattle.core.input import InputEvent, Key
from robobattle.game import Match


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a headless Robot Battle match")
    parser.add_argument("--mode", choices=["timed", "command"], help="Battle cadence")
    parser.add_argument("--seed", type=int, help="RNG seed for a reproducible match")
    parser.add_argument(
        "--loadout",
        nargs=3,
        metavar=("WEAPON", "ARMOR", "ACCESSORY"),
        default=["Sword", "Shield", "Boots"],
        help="Equipment to pick during selection",
    )
    parser.add_argument("--max-rounds", type=int, default=500, help="Safety cap on rounds")
    parser.add_argument("--debug", action="store_true", help="Print DEBUG-level diagnostics after the match")
    parser.add_argument("--trace-events", action="store_true", help="Print every event as it is published")
    return parser.parse_args()


def press(match: Match, key: Key) -> None:
    match.handle_input(InputEvent.from_key(key))


def select_item(match: Match, item_name: str) -> None:
    """Move the cursor to an item in the current category and confirm it."""
    slot = match.state.selection.current_slot
    items = match.catalog.items(slot)
    target = EquipmentId.parse(item_name)
    if target not in items:
        raise SystemExit(f"{item_name} is not a valid {slot.value}; choose from {[i.value for i in items]}")
    while match.selection_manager.highlighted_item() != target:
        press(match, Key.DOWN)
    press(match, Key.Z)


def play(match: Match, loadout: list[str], max_rounds: int) -> None:
    press(match, Key.ENTER)  # Title
    for _slot, item_name in zip(SELECTION_ORDER, loadout):
        select_item(match, item_name)
    if match.state.phase is MatchPhase.EQUIPMENT_SELECTION:
        press(match, Key.ENTER)  # Pre-battle gate

    rounds = 0
    while match.state.phase is MatchPhase.BATTLE and rounds < max_rounds:
        if match.config.is_timed:
            match.advance(match.config.round_interval)
        else:
            press(match, Key.Z)
        rounds += 1


def main():
    args = parse_args()
    overrides = {}
    if args.mode:
        overrides["battle_mode"] = args.mode
    if args.seed is not None:
        overrides["seed"] = args.seed

    event_manager = EventManager(enable_debug_logging=args.trace_events)
    event_manager.set_debug_callback(print)

    match = Match(config=load_match_config(**overrides), event_manager=event_manager)
    if args.debug:
        match.log_manager.toggle_debug()
    play(match, args.loadout, args.max_rounds)

    view = match.get_view()
    for line in view.battle_log:
        print(line)
    print()
    if view.player_won is None:
        print("Battle did not finish.")
    else:
        print("You win!" if view.player_won else "You lose!")
    print(f"{view.player.name}: HP {view.player.hp}/{view.player.hp_max}")
    print(f"{view.enemy.name}: HP {view.enemy.hp}/{view.enemy.hp_max}")

    if args.debug:
        print()
        for entry in match.log_manager.get_messages():
            print(entry.format(include_timestamp=True))


if __name__ == "__main__":
    main()
