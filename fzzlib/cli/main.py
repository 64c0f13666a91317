import sys

from .commands.parser import build_parser
from .observability import configure_logging
from ..fuzzy.core.types import FuzzyError

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args) or 0
    except FuzzyError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
