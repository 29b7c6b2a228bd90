#!/usr/bin/env python3
"""
Demo driver for pypie.

Usage:
    pypie [--no-warnings] [--allow-writing] [--verbose]

Returns:
    0: demo ran to completion
    1: the object model raised an error
"""

import argparse
import logging
import sys

from .config import allow_writing_to_objects, show_warnings
from .errors import PieError
from .examples import define_greeters
from .model.catalog import Catalog


def run_demo(allow_writing: bool = False) -> None:
    catalog = Catalog()
    Greeter, Person = define_greeters(catalog)

    greeter = Greeter()
    greeter.say_hello("World")

    slim = Person("Slim Shady")
    jimmy = Person("Jimmy")

    slim.introduce()
    slim.say_hello("World")
    jimmy.introduce()

    print(f"Persons created: {Person.count}")

    if allow_writing:
        slim.nickname = "Slim"
        print(f"External key from outside: {slim.nickname}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="pypie: classes with polymorphism, inheritance and encapsulation (demo)"
    )
    parser.add_argument("--no-warnings", action="store_true", help="Suppress diagnostic warnings")
    parser.add_argument(
        "--allow-writing",
        action="store_true",
        help="Allow writing unknown keys onto objects from outside",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose (DEBUG) logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    show_warnings(not args.no_warnings)
    allow_writing_to_objects(args.allow_writing)

    try:
        run_demo(allow_writing=args.allow_writing)
    except PieError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
