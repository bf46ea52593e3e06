"""Play bot-vs-bot Pineapple OFC hands in the terminal."""
import argparse
import logging

from ofc.engine.loop import GameLoop
from ofc.engine.state import MatchContext

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--hands', type=int, default=1)
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--quiet', action='store_true')
    parser.add_argument('--log-level', default='WARNING')
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    loop = GameLoop(
        context = MatchContext(seed=args.seed),
        verbose = not args.quiet,
    )
    net = loop.run(args.hands)
    if args.quiet:
        print('Net points:', net)
