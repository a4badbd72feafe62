# src/bashpy/cli.py
"""
Command-line interface for the bashpy example scripts
"""

import argparse
import json
import logging
import sys

from . import __version__
from .cheatsheet import idioms_for, render_markdown
from .config import ScriptConfig, configure_logging
from .counting import count_in_file, count_matching_lines
from .enums import Topic
from .greeting import greeting
from .jsonfield import format_value, read_field
from .largefiles import find_large_files, format_bytes
from .urlcheck import check_url

logger = logging.getLogger(__name__)


def _add_verbose(parser):
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log diagnostics to stderr'
    )


def _fail(prog, message):
    print(f"{prog}: {message}", file=sys.stderr)
    return 1


def _load_config():
    """Read BASHPY_* overrides.

    Returns ``(config, error)``. On a malformed value the defaults come back
    with the error so the parser can still answer ``--help`` before the
    script reports it.
    """
    try:
        return ScriptConfig.from_env(), None
    except ValueError as exc:
        return ScriptConfig(), exc


def _text_stdin():
    """sys.stdin decoded as UTF-8 with bad bytes replaced, like count_in_file."""
    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(encoding="utf-8", errors="replace")
    return sys.stdin


def count_error_main(argv=None):
    """count-error [FILE]: print how many lines contain ERROR."""
    prog = "count-error"
    config, config_error = _load_config()

    parser = argparse.ArgumentParser(
        prog=prog,
        description="Count lines containing a literal substring (default: ERROR)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  count-error app.log              # Count ERROR lines in app.log
  tail -n 100 app.log | count-error
  count-error --pattern WARN app.log
        """
    )
    parser.add_argument('file', nargs='?', default='-', help="File to read, '-' or omitted for stdin")
    parser.add_argument('--pattern', default=config.pattern, help='Substring to look for')
    _add_verbose(parser)
    args = parser.parse_args(argv)
    if config_error:
        return _fail(prog, config_error)
    configure_logging(args.verbose or config.verbose)

    if args.file == '-':
        count = count_matching_lines(_text_stdin(), args.pattern)
    else:
        try:
            count = count_in_file(args.file, args.pattern)
        except OSError as exc:
            return _fail(prog, f"{args.file}: {exc.strerror or exc}")

    print(count)
    return 0


def read_region_main(argv=None):
    """read-region [CONFIG]: print service.region from a JSON file."""
    prog = "read-region"
    config, config_error = _load_config()

    parser = argparse.ArgumentParser(
        prog=prog,
        description="Print a field from a JSON document (default: service.region)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  read-region config.json
  read-region --field service.name config.json
        """
    )
    parser.add_argument('config', nargs='?', default='config.json', help='JSON file to read')
    parser.add_argument('--field', default=config.field, help='Dotted path to the field')
    _add_verbose(parser)
    args = parser.parse_args(argv)
    if config_error:
        return _fail(prog, config_error)
    configure_logging(args.verbose or config.verbose)

    try:
        value = read_field(args.config, args.field)
    except OSError as exc:
        return _fail(prog, f"{args.config}: {exc.strerror or exc}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return _fail(prog, f"{args.config}: invalid JSON: {exc}")
    except KeyError as exc:
        return _fail(prog, f"{args.config}: missing field {exc.args[0]}")
    except TypeError as exc:
        return _fail(prog, f"{args.config}: {exc}")

    print(format_value(value))
    return 0


def list_large_files_main(argv=None):
    """list-large-files [DIRECTORY]: print regular files over 1 MiB."""
    prog = "list-large-files"
    config, config_error = _load_config()

    parser = argparse.ArgumentParser(
        prog=prog,
        description="List regular files larger than a threshold (default: 1 MiB)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  list-large-files                    # Current directory
  list-large-files /var/log --human-readable
  list-large-files --min-size 0 .     # Every non-empty file
        """
    )
    parser.add_argument('directory', nargs='?', default='.', help='Directory to scan (not recursive)')
    parser.add_argument('--min-size', type=int, default=config.min_size, metavar='BYTES',
                        help='List files strictly larger than this')
    parser.add_argument('--human-readable', action='store_true', help='Show sizes next to names')
    _add_verbose(parser)
    args = parser.parse_args(argv)
    if config_error:
        return _fail(prog, config_error)
    configure_logging(args.verbose or config.verbose)

    try:
        entries = find_large_files(args.directory, args.min_size)
    except OSError as exc:
        return _fail(prog, f"{args.directory}: {exc.strerror or exc}")

    for entry in entries:
        if args.human_readable:
            print(f"{entry.name}\t{format_bytes(entry.size)}")
        else:
            print(entry.name)
    return 0


def greet_main(argv=None):
    """greet [--name NAME]: print a greeting."""
    prog = "greet"
    config, config_error = _load_config()

    parser = argparse.ArgumentParser(
        prog=prog,
        description="Print a greeting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  greet                # Hello, world
  greet --name=Ada     # Hello, Ada
  greet --name Ada     # Hello, Ada
        """
    )
    parser.add_argument('--name', help=f'Who to greet (default: {config.default_name})')
    _add_verbose(parser)
    args = parser.parse_args(argv)
    if config_error:
        return _fail(prog, config_error)
    configure_logging(args.verbose or config.verbose)

    print(greeting(args.name, default=config.default_name))
    return 0


def check_url_main(argv=None):
    """check-url URL: exit 0 only when the URL answers 200."""
    prog = "check-url"
    config, config_error = _load_config()

    parser = argparse.ArgumentParser(
        prog=prog,
        description="GET a URL and report whether it answered HTTP 200",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  check-url https://example.com               # OK 200
  check-url --timeout 2 https://example.com/missing
        """
    )
    parser.add_argument('url', help='URL to request')
    parser.add_argument('--timeout', type=float, default=config.timeout, metavar='SECONDS',
                        help='Request timeout in seconds')
    _add_verbose(parser)
    args = parser.parse_args(argv)
    if config_error:
        return _fail(prog, config_error)
    configure_logging(args.verbose or config.verbose)

    result = check_url(args.url, timeout=args.timeout)
    if result.ok:
        print(result.summary())
        return 0
    print(result.summary(), file=sys.stderr)
    return 1


def main(argv=None):
    """Cheat-sheet viewer entry point."""
    parser = argparse.ArgumentParser(
        prog="bashpy",
        description="Bash to Python cheat-sheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bashpy --list            # Show topics
  bashpy loops             # Show the loop idioms
  bashpy --markdown        # Print the whole sheet as Markdown
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'bashpy v{__version__}'
    )

    parser.add_argument(
        'topic',
        nargs='?',
        choices=[t.value for t in Topic],
        metavar='TOPIC',
        help='Show only this topic'
    )
    parser.add_argument('--list', action='store_true', help='List topics')
    parser.add_argument('--markdown', action='store_true', help='Render as Markdown')
    _add_verbose(parser)

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.list:
        for topic in Topic:
            print(topic.value)
        return 0

    if args.topic is None:
        print(render_markdown())
        return 0

    idioms = idioms_for(Topic(args.topic))
    logger.info(f"{len(idioms)} idiom(s) for {args.topic}")
    if args.markdown:
        print(render_markdown(idioms))
        return 0

    for idiom in idioms:
        print(f"{idiom.title}")
        print("-" * len(idiom.title))
        print("bash:")
        print("  " + idiom.bash.replace("\n", "\n  "))
        print("python:")
        print("  " + idiom.python.replace("\n", "\n  "))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
