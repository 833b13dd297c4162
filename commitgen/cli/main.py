"""CLI Main Entry Point"""

import asyncio
import logging
import sys
import time

from commitgen.config import API_KEY_ENV, Config, load_api_key, load_config
from commitgen.errors import InvalidInputError, LLMError, LLMTimeoutError
from commitgen.llm import CommitMessage, LLMClient, get_client
from commitgen.output import CHECK, Spinner, dim, display_message, print_error, success, warning
from commitgen.prompts import PromptBuilder, PromptConfig
from commitgen.styles import CommitStyle

from commitgen.cli.args import parse_args
from commitgen.cli.commands import display_config, run_install_completion
from commitgen.cli.utils import copy_to_clipboard

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request at INFO; keep it quiet unless debugging
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _load_config(args) -> Config:
    """Resolve settings. Precedence: CLI args > environment variables > config file."""
    config = load_config()
    for message in config.apply_env():
        print(f"Config warning: {message}", file=sys.stderr)

    if args.model:
        config.model = args.model
    if args.style:
        config.style = args.style.value
    if args.timeout:
        config.timeout = args.timeout
    if args.no_body:
        config.include_body = False
    return config


def _generate_message(client: LLMClient, prompt: str, style: CommitStyle) -> CommitMessage:
    """Run one generation with a spinner on stderr."""
    with Spinner(stream=sys.stderr):
        return asyncio.run(client.generate(prompt, style))


def _copy_and_report(message: str, stream) -> None:
    """Report the clipboard result on stream. Pipe mode passes stderr so stdout stays the raw message."""
    copied, reason = copy_to_clipboard(message)
    if copied:
        print(f"{success(CHECK)} Copied to clipboard!", file=stream)
    else:
        print(f"{warning('!')} Could not copy to clipboard: {reason}", file=stream)


def _describe_error(e: LLMError) -> str:
    """User-facing text for a failure, with CLI hints where one helps."""
    if isinstance(e, LLMTimeoutError):
        return f"{e}\nRaise the limit with --timeout SECONDS or GCM_TIMEOUT."
    return str(e)


def _print_verbose_stats(prompt: str, message: CommitMessage, elapsed: float) -> None:
    print(dim(f"  Model: {message.model}"))
    print(dim(f"  Prompt: {len(prompt)} chars"))
    print(dim(f"  Tokens: {message.tokens_used}"))
    print(dim(f"  Generate: {elapsed:.2f}s"))


def run_generation(client: LLMClient, prompt: str, style: CommitStyle,
                   copy: bool = False, verbose: bool = False) -> int:
    """Generate and present one commit message. Returns the process exit code."""
    is_pipe = not sys.stdout.isatty()

    t0 = time.time()
    try:
        message = _generate_message(client, prompt, style)
    except LLMError as e:
        logger.debug("Generation failed: %r", e)
        print_error(_describe_error(e))
        return 1
    elapsed = time.time() - t0

    # Pipe mode: output raw message only
    if is_pipe:
        print(message.text)
    else:
        display_message(message.text)
        if verbose:
            _print_verbose_stats(prompt, message, elapsed)

    if copy:
        _copy_and_report(message.text, sys.stderr if is_pipe else sys.stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    _configure_logging(args.verbose)

    if args.install_completion:
        return run_install_completion()

    config = _load_config(args)
    api_key = load_api_key()

    if args.display_config:
        return display_config(config)

    try:
        style = CommitStyle.parse(config.style)
    except InvalidInputError as e:
        print_error(f"{e}\nCheck --style, GCM_STYLE and the style in .gcmrc.")
        return 1

    prompt_config = PromptConfig(
        style=style,
        include_body=config.include_body,
        max_subject_length=config.max_subject_length,
        hint=args.hint,
    )

    try:
        prompt = PromptBuilder().build(args.description, prompt_config)
        if api_key is None:
            print_error(
                f"{API_KEY_ENV} is not set. Add it to your environment or a .env file:\n"
                f"  export {API_KEY_ENV}='your-key-here'"
            )
            return 1
        client = get_client(config, api_key)
    except LLMError as e:
        print_error(str(e))
        return 1

    logger.debug("Using %s with style %s", client.name, style.value)
    return run_generation(client, prompt, style, copy=args.copy, verbose=args.verbose)
