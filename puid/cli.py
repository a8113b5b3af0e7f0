import argparse
import logging
import sys
import time

from puid.core.clock import COUNTER
from puid.core.config import Config
from puid.core.exceptions import PuidError
from puid.core.ids import builder, validate

logger = logging.getLogger("puid.cli")


def _non_negative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def _build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="puid")
    sub = parser.add_subparsers(dest="cmd", required=True)

    new_p = sub.add_parser("new", help="generate identifiers")
    new_p.add_argument("prefix", nargs="?", default=config.default_prefix)
    new_p.add_argument("-e", "--entropy", type=int, default=config.default_entropy)
    new_p.add_argument("-n", "--count", type=_non_negative, default=1)

    check_p = sub.add_parser("check", help="check whether a prefix is valid")
    check_p.add_argument("prefix")

    bench_p = sub.add_parser("bench", help="time identifier creation")
    bench_p.add_argument("--prefix", default="test")
    bench_p.add_argument("--iterations", type=_non_negative, default=100_000)

    return parser


def main(argv=None) -> int:
    try:
        config = Config.load()
        config.validate()
    except ValueError as e:
        logger.error("bad configuration: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=config.log_level)

    args = _build_parser(config).parse_args(argv)

    if args.cmd == "new":
        try:
            b = builder().set_prefix(args.prefix).set_entropy(args.entropy)
        except (PuidError, ValueError) as e:
            logger.error("cannot build id: %s", e)
            print(f"error: {e}", file=sys.stderr)
            return 2
        for _ in range(args.count):
            print(b.build())

    elif args.cmd == "check":
        ok = validate(args.prefix)
        print("valid" if ok else "invalid")
        return 0 if ok else 1

    elif args.cmd == "bench":
        try:
            b = builder().set_prefix(args.prefix)
        except PuidError as e:
            logger.error("cannot bench: %s", e)
            print(f"error: {e}", file=sys.stderr)
            return 2
        seen = set()
        start = time.perf_counter()
        for _ in range(args.iterations):
            seen.add(b.build())
        elapsed = time.perf_counter() - start
        per_id = elapsed / args.iterations * 1e6 if args.iterations else 0.0
        logger.info("bench finished, counter at %d", COUNTER.value)
        print(f"iterations : {args.iterations}")
        print(f"elapsed    : {elapsed:.3f}s")
        print(f"per id     : {per_id:.2f}us")
        print(f"distinct   : {len(seen)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
