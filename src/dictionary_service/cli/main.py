"""
Dictionary service CLI.
"""

import argparse

from dictionary_service.cli.commands import convert, query, serve


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dictionary-service", description="Dictionary lookup service"
    )
    subparsers = parser.add_subparsers(dest="command")

    serve.add_subparser(subparsers)
    convert.add_subparser(subparsers)
    query.add_subparser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
