"""Command-line interface handler for cslparser."""

import argparse
import json
import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from . import delimiters
from .errors import TokenizerException
from .escapes import translate_escapes
from .tokenizer import Tokenizer

console = Console()
err_console = Console(stderr=True)

DEMO_TEXT = """test a b 'single quote' "double quote" 'escaping \\' quote' "escaping \\" quote \\\\" \\\\
line2
line3 "double quote"
rawJson '{"type":"json"}'
"""

DEMO_SAMPLES = [
    "java Main.java",
    DEMO_TEXT,
    'System.out.println("Hello.world");',
]


def print_usage() -> None:
    """Print usage information."""
    print("""Usage: cslparser [-h | --help] <command> [<args>]

Commands:
  split                    Split text into tokens
      -d, --delimiter CHARS  Split on any of these characters instead of whitespace
                             Escapes such as \\t are resolved first
      -f, --file FILE        Read the text from a file (default: <text> or stdin)
      -l, --lines            Split every non-blank line on its own
      --json                 Print tokens as JSON instead of a table
      <text>                 The text to split

  demo                     Split the bundled samples with whitespace and '.' delimiters
      -d, --delimiter CHARS  Use these characters instead of '.' for the second pass

  help                     Show this help message
  version                  Show program version
""")


def print_version() -> None:
    """Print version information."""
    print(__version__)


def build_tokenizer(chars: Optional[str]) -> Tokenizer:
    """Create a tokenizer splitting on chars, or on whitespace if None."""
    if chars is None:
        return Tokenizer()
    return Tokenizer(delimiters.any_of(translate_escapes(chars)))


def render_tokens(tokens: tuple[str, ...], title: Optional[str] = None) -> Table:
    """Render tokens as a two-column table."""
    table = Table(title=escape(title) if title else None)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Token", style="green")
    for i, token in enumerate(tokens):
        table.add_row(str(i), escape(repr(token)))
    return table


def read_source(args: argparse.Namespace) -> str:
    """Get the text to split from the file, the argument or stdin."""
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def cmd_split(args: argparse.Namespace) -> None:
    """Execute the split command."""
    try:
        tokenizer = build_tokenizer(args.delimiter)
        source = read_source(args)
        if args.lines:
            results = [
                tokenizer.parse(line) for line in source.splitlines() if line.strip()
            ]
        else:
            results = [tokenizer.parse(source)]
    except (TokenizerException, OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if args.json:
        if args.lines:
            print(json.dumps([list(tokens) for tokens in results]))
        else:
            print(json.dumps(list(results[0])))
        return

    for line_num, tokens in enumerate(results, start=1):
        title = f"Line {line_num}" if args.lines else None
        console.print(render_tokens(tokens, title))


def cmd_demo(args: argparse.Namespace) -> None:
    """Execute the demo command."""
    chars = args.delimiter if args.delimiter is not None else "."
    try:
        passes = [("whitespace", Tokenizer()), (repr(chars), build_tokenizer(chars))]
    except TokenizerException as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    for name, tokenizer in passes:
        console.print(f"[magenta]┃[/magenta] Delimiter: {escape(name)}")
        for sample in DEMO_SAMPLES:
            console.print(render_tokens(tokenizer.parse(sample), repr(sample)))


def run(argv: list[str]) -> None:
    """Parse arguments and execute the requested command."""
    parser = argparse.ArgumentParser(description="Shell-style tokenizer", add_help=False)

    # Add global help
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")

    # Add subparsers for commands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser("split", add_help=False)
    split_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for split"
    )
    split_parser.add_argument(
        "-d", "--delimiter", type=str, help="Characters to split on"
    )
    split_parser.add_argument(
        "-f", "--file", type=str, help="File containing the text to split"
    )
    split_parser.add_argument(
        "-l", "--lines", action="store_true", help="Split each line separately"
    )
    split_parser.add_argument(
        "--json", action="store_true", help="Print tokens as JSON"
    )
    split_parser.add_argument("text", nargs="?", help="Text to split")

    # Demo command
    demo_parser = subparsers.add_parser("demo", add_help=False)
    demo_parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for demo"
    )
    demo_parser.add_argument(
        "-d", "--delimiter", type=str, help="Characters for the second pass"
    )

    # Help command
    subparsers.add_parser("help", add_help=False)

    # Version command
    subparsers.add_parser("version", add_help=False)

    # Parse arguments
    if not argv:
        print_usage()
        return

    args = parser.parse_args(argv)

    # Handle global help
    if args.help or args.command == "help":
        print_usage()
        return

    # Handle version
    if args.command == "version":
        print_version()
        return

    # Handle command-specific help
    if hasattr(args, "help") and args.help:
        print_usage()
        return

    # Execute commands
    if args.command == "split":
        cmd_split(args)
    elif args.command == "demo":
        cmd_demo(args)
    else:
        print_usage()


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        run(argv)
    except KeyboardInterrupt:
        sys.exit(130)
