"""patternscan CLI entry point.

Usage: patternscan [-v] {scan,profile} ...
"""
import argparse
import logging
import sys


def _add_scan_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "scan",
        help="Report every occurrence of the given patterns in a text.",
    )
    p.add_argument(
        "text", nargs="?", default=None,
        help="Text to scan (default: read --text-file, else stdin).",
    )
    p.add_argument(
        "-p", "--pattern", action="append", default=[], dest="patterns",
        help="Pattern to search for. Repeat for several patterns.",
    )
    p.add_argument(
        "--patterns-file", default=None,
        help="File with one pattern per line.",
    )
    p.add_argument(
        "--text-file", default=None,
        help="Read the text to scan from this file.",
    )
    p.add_argument(
        "--stream", action="store_true",
        help="Print start, end and pattern per match in scan order.",
    )


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "profile",
        help="Time automaton construction and scanning against a naive scan.",
    )
    p.add_argument(
        "--patterns", type=int, default=200,
        help="Number of generated patterns (default: 200)",
    )
    p.add_argument(
        "--min-length", type=int, default=1,
        help="Shortest generated pattern (default: 1)",
    )
    p.add_argument(
        "--max-length", type=int, default=8,
        help="Longest generated pattern (default: 8)",
    )
    p.add_argument(
        "--text-length", type=int, default=100_000,
        help="Length of the generated text (default: 100000)",
    )
    p.add_argument(
        "--alphabet", default="abcd",
        help="Characters patterns and text are drawn from (default: abcd)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--cprofile", action="store_true",
        help="Enable cProfile and print top functions by cumulative time.",
    )


def _read_file(parser: argparse.ArgumentParser, path: str) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError as exc:
        parser.error(f"cannot read {path}: {exc.strerror}")


def _run_scan(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    from patternscan.automaton.aho_corasick import AhoCorasick
    from patternscan.profiling.report import format_match, format_matches

    patterns = list(args.patterns)
    if args.patterns_file is not None:
        patterns.extend(_read_file(parser, args.patterns_file).splitlines())
    if not patterns:
        parser.error("scan needs at least one -p/--pattern or --patterns-file")

    if args.text is not None:
        text = args.text
    elif args.text_file is not None:
        text = _read_file(parser, args.text_file)
    else:
        text = sys.stdin.read()

    ac = AhoCorasick(patterns)
    ac.build()
    if args.stream:
        for m in ac.finditer(text):
            print(format_match(m))
    else:
        print(format_matches(ac.search(text)))


def _run_profile(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    from patternscan.profiling.harness import run_scan
    from patternscan.profiling.report import format_report

    try:
        result = run_scan(
            num_patterns=args.patterns,
            min_length=args.min_length,
            max_length=args.max_length,
            text_length=args.text_length,
            alphabet=args.alphabet,
            seed=args.seed,
            profile=args.cprofile,
        )
    except ValueError as exc:
        parser.error(str(exc))
    print(format_report(result))
    if result.cprofile_stats:
        print()
        print("--- cProfile top functions ---")
        print(result.cprofile_stats)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="patternscan",
        description="Multi-pattern string search with an Aho-Corasick automaton.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_scan_parser(subparsers)
    _add_profile_parser(subparsers)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "scan":
        _run_scan(parser, args)
    elif args.command == "profile":
        _run_profile(parser, args)
