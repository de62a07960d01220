"""Main entry point for the terminal blackjack front-end."""

import argparse
import logging
import sys
from random import Random
from typing import Callable, Sequence

from blackjack.errors import EmptyDeckError, InvalidActionError
from blackjack.game import GameEvent, Round, RoundPhase
from blackjack.participants import Action, AutoPlayer
from blackjack.rules import RuleSet
from config import config
from text_ui.commands import ACTION_PROMPT, parse_action
from text_ui.render import (
    DEALER_TURN_EVENTS,
    render_dealer_event,
    render_outcome,
    render_round,
)

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

NAME_PROMPT = "Input your name (or leave blank to be Player): "
BOT_NAME = "Bot"


def ask_name(input_fn: InputFn = input) -> str:
    """Ask for the name shown next to the player's cards."""
    return input_fn(NAME_PROMPT).strip() or "Player"


class Application:
    """Plays rounds in a terminal, reading decisions from a person or a bot."""

    def __init__(
        self,
        rules: RuleSet,
        rng: Random,
        auto: bool = False,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        player_name: str | None = None,
    ) -> None:
        self.rules = rules
        self.rng = rng
        self.bot = AutoPlayer() if auto else None
        self.player_name = player_name or (BOT_NAME if auto else "Player")
        self._input = input_fn
        self._output = output_fn

    def play_round(self) -> Round:
        """Deal and play one round to the end, printing as it goes."""
        round_ = Round(rules=self.rules, rng=self.rng)
        for event_type in DEALER_TURN_EVENTS:
            round_.subscribe(self._show_dealer_event, event_type)
        snapshot = round_.start()

        while snapshot.phase == RoundPhase.PLAYER_TURN:
            self._output(render_round(snapshot, self.player_name))
            action = self._next_action(round_)
            try:
                snapshot = round_.submit(action)
            except InvalidActionError as exc:
                self._output(str(exc))
            self._output("")

        self._output("---Final hands---")
        self._output(render_round(snapshot, self.player_name))
        if snapshot.outcome is not None:
            self._output(render_outcome(snapshot.outcome))
        return round_

    def _show_dealer_event(self, event: GameEvent) -> None:
        self._output(render_dealer_event(event))

    def _next_action(self, round_: Round) -> Action:
        if self.bot is not None:
            action = self.bot.decide(round_.player.hand, round_.dealer.upcard)
            self._output(f"{ACTION_PROMPT} {action}")
            return action

        while True:
            action = parse_action(self._input(f"{ACTION_PROMPT} "))
            if action is not None:
                return action
            self._output("Invalid action input")

    def run(self, rounds: int) -> int:
        """Play ``rounds`` rounds. Returns a process exit code."""
        for number in range(1, rounds + 1):
            self._output(f"=== Round {number} ===")
            try:
                round_ = self.play_round()
            except EmptyDeckError as exc:
                logger.error("Round %d aborted: %s", number, exc)
                self._output("The deck ran out; round aborted.")
                return 1
            except (EOFError, KeyboardInterrupt):
                self._output("")
                return 130
            logger.debug("Round %d finished: %s", number, round_.outcome)
        return 0


def build_parser() -> argparse.ArgumentParser:
    """Command-line options."""
    p = argparse.ArgumentParser(description="Play blackjack against the dealer.")
    p.add_argument("--seed", type=int, default=config.game.seed, help="shuffle seed")
    p.add_argument("--rounds", type=int, default=1, help="number of rounds to play")
    p.add_argument(
        "--stand-soft-17",
        action="store_true",
        help="dealer stands on soft 17 (default: hits)",
    )
    p.add_argument("--auto", action="store_true", help="let a bot make the decisions")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the terminal UI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.log_level,
    )

    rules = config.game.to_rules()
    if args.stand_soft_17:
        rules = RuleSet(dealer_hits_soft_17=False, blackjack_payout=rules.blackjack_payout)

    try:
        player_name = BOT_NAME if args.auto else ask_name()
    except (EOFError, KeyboardInterrupt):
        return 130
    app = Application(
        rules=rules,
        rng=Random(args.seed),
        auto=args.auto,
        player_name=player_name,
    )
    return app.run(max(args.rounds, 1))


if __name__ == "__main__":
    sys.exit(main())
