"""CLI Argument Parsing"""

import argparse

import argcomplete
from argcomplete.completers import ChoicesCompleter

from commitgen import __version__
from commitgen.errors import InvalidInputError
from commitgen.styles import STYLE_NAMES, CommitStyle


def _style_arg(value: str) -> CommitStyle:
    try:
        return CommitStyle.parse(value)
    except InvalidInputError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gcm',
        description='Generate Git commit messages with the Gemini API',
        epilog='Example: gcm "add retry to the upload client" -s gitmoji'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('description', nargs='?', help='Short description of the change')

    # Style options
    style = parser.add_argument('-s', '--style', type=_style_arg, metavar='{' + ','.join(STYLE_NAMES) + '}',
                                help='Commit message style (default: conventional)')
    style.completer = ChoicesCompleter(STYLE_NAMES)
    parser.add_argument('--no-body', action='store_true', help='Generate subject line only, no bullet points')
    parser.add_argument('--hint', type=str, metavar='TEXT', help='Extra context for the model')

    # LLM options
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Gemini model name')
    parser.add_argument('--timeout', type=float, metavar='SECONDS', help='Give up after this many seconds')

    # Output options
    parser.add_argument('-c', '--copy', action='store_true', help='Copy the message to the clipboard')
    parser.add_argument('--verbose', action='store_true', help='Show debug logging and token usage')

    # Setup/config
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')
    parser.add_argument('--install-completion', action='store_true', help='Install shell tab completion')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    needs_description = not (args.display_config or args.install_completion)
    if needs_description and args.description is None:
        parser.error("the following arguments are required: description")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be greater than 0")
    return args
