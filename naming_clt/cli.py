"""Command line entry point for the naming tool."""

import argparse
import logging
import sys
from pathlib import Path

from naming_clt.captor import Captor
from naming_clt.case_filter import Filter
from naming_clt.convertor import Convertor
from naming_clt.errors import NamingError
from naming_clt.load_config import load_config
from naming_clt.read_input import read_texts
from naming_clt.style_tag import FILTER_TAGS, OUTPUT_TAGS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        prog="naming",
        description=(
            "Extract and convert the naming format (case|notation) of identifiers "
            "from files or stdin."
        ),
    )
    ap.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Files to read; stdin is read when none is given",
    )
    ap.add_argument(
        "-f",
        "--filter",
        nargs="+",
        choices=FILTER_TAGS,
        help=(
            "Naming cases of captured words to keep: S(SCREAMING_SNAKE) s(snake) "
            "k(kebab) c(camel) h(hungarian) p(pascal) (default: S s k c p)"
        ),
    )
    ap.add_argument(
        "-o",
        "--output",
        nargs="+",
        choices=OUTPUT_TAGS,
        help="Target naming cases, printed in the given order (default: S s k c p)",
    )
    ap.add_argument(
        "-l",
        "--locator",
        nargs="+",
        help=r"Regex pairs around identifiers, joined by {} (default: \s{}\s)",
    )
    ap.add_argument(
        "-e",
        "--eof",
        help="Logical EOF string; text after it is ignored",
    )
    ap.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    ap.add_argument(
        "-r",
        "--regex",
        action="store_true",
        help="Join target formats of each word into an OR regex",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline details to stderr",
    )
    return ap


def output_as_string(convertor: Convertor, *, json: bool, regex: bool) -> str:
    """Pick the output format from the --json and --regex flags."""
    if json and regex:
        return convertor.to_regex_json()
    if json:
        return convertor.to_json()
    if regex:
        return convertor.to_regex()
    return convertor.to_lines()


def operate(args: argparse.Namespace) -> str:
    """Run the whole pipeline, from input text to the output string."""
    config = load_config(args.config)
    filter_options = [str(o) for o in args.filter or config["filter"]]
    output_options = [str(o) for o in args.output or config["output"]]
    locators = [str(loc) for loc in args.locator or config["locators"]]
    eof = args.eof if args.eof is not None else config["eof"]

    # fail on bad options before touching the input
    word_filter = Filter(filter_options)
    captor = Captor(locators)

    texts = read_texts(args.files, eof)
    words = captor.capture_words(texts)
    convertor = Convertor(output_options, word_filter.to_naming_cases(words))
    return output_as_string(convertor, json=args.json, regex=args.regex)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the pipeline and print the result."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = operate(args)
    except NamingError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"naming: {exc}", file=sys.stderr)
        return 1

    if sys.stdout.isatty():
        print(output)
    else:
        print(output, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
