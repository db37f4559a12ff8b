import argparse
import logging
import sys
from typing import List, Optional

from .session import ValidatorSession


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='SQL Syntax Validator')

    parser.add_argument('-f', '--file',
                       help='Validate the statements in a script file instead of reading stdin')

    parser.add_argument('-q', '--quiet',
                       action='store_true',
                       help='Do not print the token list of each statement')

    parser.add_argument('-v', '--verbose',
                       action='store_true',
                       help='Log validation details to stderr')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    session = ValidatorSession(show_tokens=not args.quiet)

    if args.file:
        try:
            with open(args.file, encoding='utf-8') as script:
                session.run_lines(script)
        except OSError as e:
            print(f"Error: Could not read {args.file}: {e}", file=sys.stderr)
            return 1
        return 0

    session.interactive_session()
    return 0


if __name__ == '__main__':
    sys.exit(main())
