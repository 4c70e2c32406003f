"""Headless runner: simulate an idle game without a window.

Frames are fed from a simulated clock, so a minute of play finishes
instantly and always produces the same result for the same seed.

Examples:
  python -m idle_game --seconds 120 --gravity-drill IRON_ORE
  python -m idle_game --grant COAL=5 --coal-drill GOLD_ORE --save save.json
  python -m idle_game --load save.json --seconds 30
"""
from __future__ import annotations

import argparse
import logging
from fractions import Fraction

from idle_economy import GOODS, Good, GoodGroup, Producer, ProducerKind, ThrottlePolicy
from idle_game.config import GameConfig
from idle_game.game import IdleGame
from idle_game.storage import load_game, save_game

ORE_NAMES = [good.name for good in GOODS.group_iter(GoodGroup.ORE)]


def _grant(text: str) -> tuple[Good, Fraction]:
    name, _, amount = text.partition("=")
    try:
        return Good[name.upper()], Fraction(amount or "1")
    except (KeyError, ValueError, ZeroDivisionError):
        raise argparse.ArgumentTypeError(f"expected GOOD=AMOUNT, got {text!r}") from None


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="dull-idle headless simulation")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--tps", type=int, default=20, help="Ticks per second (default: 20)")
    p.add_argument("--fps", type=int, default=60, help="Simulated frames per second (default: 60)")
    p.add_argument("--seconds", type=float, default=60.0, help="Seconds to simulate (default: 60)")
    p.add_argument("--gravity-drill", action="append", default=[], choices=ORE_NAMES,
                   metavar="ORE", help="Build a gravity drill for ORE (repeatable)")
    p.add_argument("--coal-drill", action="append", default=[], choices=ORE_NAMES,
                   metavar="ORE", help="Build a coal drill for ORE (repeatable)")
    p.add_argument("--grant", action="append", default=[], type=_grant,
                   metavar="GOOD=AMOUNT", help="Debug grant before running (repeatable)")
    p.add_argument("--policy", choices=["proportional", "all_or_nothing"],
                   default="proportional", help="Throttling policy (default: proportional)")
    p.add_argument("--load", metavar="FILE", help="Load a saved game first")
    p.add_argument("--save", metavar="FILE", help="Save the game after running")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = p.parse_args()
    args.fps = max(1, args.fps)
    return args


def _format(amount: Fraction) -> str:
    return f"{float(amount):.2f}"


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(tps=args.tps, seed=args.seed, policy=ThrottlePolicy(args.policy))
    # Every frame passes its own timestamp; the clock starts at zero.
    if args.load:
        game = load_game(args.load, config, now=0.0, time_fn=lambda: 0.0)
    else:
        game = IdleGame(config, time_fn=lambda: 0.0)

    for good, amount in args.grant:
        game.grant(good, amount)
    for name in args.gravity_drill:
        game.build(Producer(ProducerKind.GRAVITY_DRILL, Good[name]))
    for name in args.coal_drill:
        game.build(Producer(ProducerKind.COAL_DRILL, Good[name]))

    frames = int(args.seconds * args.fps)
    ticks = 0
    for frame in range(1, frames + 1):
        now = frame / args.fps
        ticks += game.update(now)

    rates = game.production_table()
    print(f"Simulated {args.seconds:g}s: {ticks} ticks over {frames} frames")
    print(f"{'Good':<12}{'Amount':>12}{'Out/s':>10}{'In/s':>10}{'Net/s':>10}")
    for good, amount in game.inventory_rows():
        rate = rates.get(good)
        out, inp, net = (rate.output, rate.input, rate.net) if rate else (0, 0, 0)
        print(f"{game.good_name(good):<12}{_format(amount):>12}{str(out):>10}{str(-inp):>10}{str(net):>10}")
    for handle, producer in game.roster.items():
        print(f"  [{handle}] {game.producer_name(producer)}")

    if args.save:
        save_game(game, args.save)


if __name__ == "__main__":
    main()
