"""passkit-template — Inspect pass bundle directories.

Usage: passkit-template inspect <folder> [--password P] [--json]
       passkit-template styles

A bundle directory holds pass.json, optional <type>[@2x|@3x].png images
and an optional <passTypeIdentifier>.pem signing key.

Settings come from PASSKIT_* environment variables, falling back to the
same keys in a .env file (--env-file, or the nearest one above the cwd
within the git checkout). The .env file is never exported.

  PASSKIT_KEY_PASSWORD  key password used when --password is not given
  PASSKIT_LOG_LEVEL     log level (default WARNING; -v forces DEBUG)
"""

import argparse
import asyncio
import logging
import sys

from passkit_template import registry
from passkit_template.core.env import Settings
from passkit_template.core.errors import PassTemplateError
from passkit_template.core.report import format_json, format_text
from passkit_template.template import Template

logger = logging.getLogger('passkit_template')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  passkit-template inspect ./bundles/event\n'
        '  passkit-template inspect ./bundles/event --json\n'
        '  PASSKIT_KEY_PASSWORD=secret passkit-template inspect ./bundles/event\n'
        '  passkit-template styles\n'
    )
    parser = argparse.ArgumentParser(
        prog='passkit-template',
        description='Load and validate pass bundle directories.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('inspect', help='Load a bundle directory and print its template')
    p.add_argument('folder', help='Bundle directory containing pass.json')
    p.add_argument('-p', '--password', default=None, help='Key password (overrides PASSKIT_KEY_PASSWORD)')
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    sub.add_parser('styles', help='List registered pass styles')
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _inspect(args: argparse.Namespace, settings: Settings) -> int:
    password = args.password if args.password is not None else settings.key_password
    try:
        template = asyncio.run(Template.load(args.folder, key_password=password))
    except PassTemplateError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        return 1

    if args.json:
        print(format_json(template, folder=args.folder))
    else:
        print(format_text(template, folder=args.folder))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = Settings.load(env_file=args.env_file)
    _configure_logging('DEBUG' if args.verbose else settings.log_level)
    if settings.env_path:
        logger.debug('settings read from %s', settings.env_path)

    if args.command == 'styles':
        for style in registry.all_styles():
            print(style)
        return 0

    if args.command == 'inspect':
        return _inspect(args, settings)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
