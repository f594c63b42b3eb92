#!/usr/bin/env python3
"""Play Kalah against the computer from the console."""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from kalah import GameConfig, IllegalMoveError, InvalidConfigurationError, Kalah, Outcome, Player, load_config

PROMPT = "kalah> "
HELP = """\
Mancala/Kalah - all commands:
NEW <p> <s>:    Creates a new game with <p> pits per player and <s>
                seeds per pit. The difficulty and the opening player
                are copied from the previous game, if possible. For the
                first game they come from the configuration (level 3,
                human opens, unless configured otherwise).

LEVEL <i>:      Sets the difficulty (1 and up; 1 to 7 are sensible).
                Changes take effect on the computer's next move.

MOVE <p>:       Sows the seeds of your pit <p>. If the game does not end
                with your move, the computer answers immediately.

SWITCH:         Restarts the game with the other side opening.

PRINT:          Shows the board. The first line holds the computer's
                pits and store, the second line yours.

HELP:           Prints this text.

QUIT:           Exits the program.
"""


@dataclass
class ShellState:
    defaults: GameConfig = field(default_factory=GameConfig)
    session: Optional[Kalah] = None
    running: bool = True


def print_error(out: TextIO, message: str) -> None:
    print(f"Error! {message}", file=out)


def describe_target(target: Optional[int]) -> str:
    return "the store" if target is None else f"pit {target}"


def report_game_over(session: Kalah, out: TextIO) -> None:
    if not session.is_game_over():
        return
    human = session.get_seeds_of_player(Player.HUMAN)
    computer = session.get_seeds_of_player(Player.COMPUTER)
    winner = session.get_winner()
    if winner is Outcome.HUMAN:
        print(f"Congratulations! You won with {human} seeds versus {computer} seeds of the machine.", file=out)
    elif winner is Outcome.COMPUTER:
        print(f"Sorry! Machine wins with {computer} seeds versus your {human}.", file=out)
    else:
        print(f"Nobody wins. Tie with {human} for each player.", file=out)


def machine_turn(state: ShellState, out: TextIO) -> bool:
    session = state.session
    if session is None or session.is_game_over() or session.next() is not Player.COMPUTER:
        return False
    session = session.machine_move()
    state.session = session
    print(
        f"Machine chose pit {session.source_pit_of_last_move()} with seeds reaching "
        f"{describe_target(session.target_pit_of_last_move())}.",
        file=out,
    )
    if session.is_game_over():
        report_game_over(session, out)
    elif session.next() is Player.COMPUTER:
        print("You must miss a turn.", file=out)
    return True


def cmd_new(state: ShellState, args: List[str], out: TextIO) -> None:
    if len(args) < 2:
        print_error(out, "Not enough arguments supplied!")
        return
    try:
        pits, seeds = int(args[0]), int(args[1])
    except ValueError:
        print_error(out, "First and second argument need to be an integer.")
        return
    try:
        if state.session is None:
            state.session = Kalah(state.defaults.with_board(pits, seeds))
        else:
            state.session = state.session.new_game(pits, seeds)
    except InvalidConfigurationError as exc:
        print_error(out, str(exc))


def cmd_level(state: ShellState, args: List[str], out: TextIO) -> None:
    if not args:
        print_error(out, "Not enough arguments supplied!")
        return
    if state.session is None:
        print_error(out, "There is currently no board present.")
        return
    try:
        level = int(args[0])
    except ValueError:
        print_error(out, "Argument must be an integer.")
        return
    try:
        state.session.set_level(level)
    except InvalidConfigurationError as exc:
        print_error(out, str(exc))


def cmd_move(state: ShellState, args: List[str], out: TextIO) -> None:
    if not args:
        print_error(out, "Not enough arguments supplied!")
        return
    try:
        pit = int(args[0])
    except ValueError:
        print_error(out, "First argument must be an integer.")
        return
    if state.session is None:
        print_error(out, "There is currently no board present.")
        return
    try:
        state.session = state.session.move(pit)
    except IllegalMoveError as exc:
        print_error(out, exc.reason)
        return
    if state.session.is_game_over():
        report_game_over(state.session, out)
    elif state.session.next() is Player.HUMAN:
        print("Machine must miss a turn.", file=out)


def cmd_switch(state: ShellState, args: List[str], out: TextIO) -> None:
    if state.session is None:
        print_error(out, "There is currently no board present.")
        return
    state.session = state.session.switched()


def cmd_print(state: ShellState, args: List[str], out: TextIO) -> None:
    if state.session is None:
        print_error(out, "There is currently no board present.")
        return
    print(state.session, file=out)


def cmd_help(state: ShellState, args: List[str], out: TextIO) -> None:
    print(HELP, file=out)


def cmd_quit(state: ShellState, args: List[str], out: TextIO) -> None:
    state.running = False


COMMANDS = {
    "NEW": cmd_new,
    "LEVEL": cmd_level,
    "MOVE": cmd_move,
    "SWITCH": cmd_switch,
    "PRINT": cmd_print,
    "HELP": cmd_help,
    "QUIT": cmd_quit,
}


def execute(state: ShellState, line: str, out: TextIO) -> None:
    slices = line.split()
    if not slices:
        return
    handler = COMMANDS.get(slices[0].upper())
    if handler is None:
        print_error(out, "Not a valid command.")
        return
    handler(state, slices[1:], out)


def run(state: ShellState, stdin: TextIO, out: TextIO) -> None:
    while state.running:
        if machine_turn(state, out):
            continue
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        execute(state, line, out)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Kalah in the console against the computer.")
    parser.add_argument("--config", type=str, help="YAML file with game defaults", default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    defaults = GameConfig()
    if args.config:
        try:
            defaults = load_config(args.config)
        except (OSError, InvalidConfigurationError) as exc:
            print_error(sys.stdout, f"Cannot load configuration: {exc}")
            sys.exit(1)

    run(ShellState(defaults=defaults), sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()
