#!/usr/bin/env python3
"""
mdmath command line tool
Converts LaTeX math in a Markdown file to Unicode, optionally rendering HTML
"""

import sys
import argparse
import logging
from pathlib import Path

from markdown_processor import MarkdownProcessor

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LOGGER_NAMES = ('mdmath', 'math_notation', 'markdown_processor')

logger = logging.getLogger('mdmath')

_installed_handlers = []


def teardown_logging():
    """Detach and close the handlers installed by setup_logging"""
    for name in LOGGER_NAMES:
        target = logging.getLogger(name)
        for handler in _installed_handlers:
            target.removeHandler(handler)
    for handler in _installed_handlers:
        handler.close()
    _installed_handlers.clear()


def setup_logging(verbose=False, log_file=None):
    """
    Attach stderr and optional file handlers to this tool's loggers.
    Handlers from an earlier call are replaced, not stacked.
    """
    teardown_logging()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT)
    level = logging.DEBUG if verbose else logging.WARNING
    for handler in handlers:
        handler.setFormatter(formatter)
        _installed_handlers.append(handler)

    for name in LOGGER_NAMES:
        target = logging.getLogger(name)
        target.setLevel(level)
        for handler in handlers:
            target.addHandler(handler)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='mdmath',
        description='Convert LaTeX math in Markdown to Unicode'
    )
    parser.add_argument('input', nargs='?', default='-', help='Markdown file, or - for stdin')
    parser.add_argument('-o', '--output', help='Write to this file instead of stdout')
    parser.add_argument('--html', action='store_true', help='Render HTML instead of Markdown')
    parser.add_argument('--no-latex', action='store_true', help='Leave math spans untouched')
    parser.add_argument('--resolve-block-math', action='store_true',
                        help='Fill $$...$$ placeholders with converted math')
    parser.add_argument('--log-file', help='Also write log messages to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def read_input(source):
    if source == '-':
        return sys.stdin.read()
    return Path(source).read_text(encoding='utf-8')


def write_output(text, destination=None):
    if destination is None:
        sys.stdout.write(text)
        if not text.endswith('\n'):
            sys.stdout.write('\n')
        return
    Path(destination).write_text(text, encoding='utf-8')


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        content = read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return 1

    logger.info(f"Processing {args.input} ({len(content)} chars)")
    processor = MarkdownProcessor(resolve_block_math=args.resolve_block_math)
    enable_latex = not args.no_latex

    if args.html:
        result = processor.convert(content, enable_latex=enable_latex)
    else:
        result = processor.prepare(content, enable_latex=enable_latex)

    try:
        write_output(result, args.output)
    except OSError as e:
        logger.error(f"Cannot write {args.output}: {e}")
        return 1

    logger.info(f"Wrote {len(result)} chars to {args.output or 'stdout'}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
