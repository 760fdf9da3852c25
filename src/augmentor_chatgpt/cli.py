"""Command-line interface for augmentor-chatgpt."""

from __future__ import annotations

import argparse
import functools
import logging
import sys

from augmentor_chatgpt.augmentor import ChatGptAugmentor
from augmentor_chatgpt.collaborators import (
    AnonymousUser,
    CurrentUserProvider,
    EnvKeyProvider,
    FileKeyProvider,
    KeyProvider,
    StaticUser,
)
from augmentor_chatgpt.config import load_config
from augmentor_chatgpt.exceptions import AugmentorError, ConfigError

logger = logging.getLogger(__name__)


def cli_error_handler(func):
    """Wrap a CLI command with standard error handling."""

    @functools.wraps(func)
    def wrapper(args):
        try:
            return func(args)
        except ConfigError as e:
            print(f"Configuration error: {e}", file=sys.stderr)
            return 1
        except AugmentorError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return wrapper


def _key_provider(args: argparse.Namespace) -> KeyProvider:
    if args.key_file:
        return FileKeyProvider(args.key_file)
    return EnvKeyProvider(args.key_env)


def _build_augmentor(args: argparse.Namespace) -> ChatGptAugmentor:
    config = load_config(args.config)
    user: CurrentUserProvider = AnonymousUser()
    if getattr(args, "user", None) is not None:
        user = StaticUser(args.user)
    return ChatGptAugmentor(
        config=config,
        key_provider=_key_provider(args),
        current_user=user,
    )


@cli_error_handler
def cmd_run(args: argparse.Namespace) -> int:
    """Run the augmentor on an input and print each generated text."""
    augmentor = _build_augmentor(args)
    try:
        result = augmentor.execute(args.input)
    finally:
        augmentor.close()

    if "_errors" in result:
        print(result["_errors"], file=sys.stderr)
        return 1

    for text in result["default"]:
        print(text)
    return 0


@cli_error_handler
def cmd_models(args: argparse.Namespace) -> int:
    """Print the models available to the configured API key."""
    augmentor = _build_augmentor(args)
    try:
        models = augmentor.list_models()
    finally:
        augmentor.close()

    if not models:
        print("No models available.", file=sys.stderr)
        return 1

    for model_id in sorted(models):
        print(model_id)
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", "-c", required=True, help="YAML configuration file")
    parser.add_argument("--key-file", help="File holding the API key")
    parser.add_argument(
        "--key-env",
        default="OPENAI_API_KEY",
        help="Environment variable holding the API key",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from augmentor_chatgpt import __version__

    parser = argparse.ArgumentParser(
        description="Chat completion augmentor", prog="augmentor-chatgpt"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # augmentor-chatgpt run
    parser_run = subparsers.add_parser("run", help="Run a chat completion")
    _add_common_arguments(parser_run)
    parser_run.add_argument("--user", help="End-user identifier sent with the request")
    parser_run.add_argument("input", help="Input text substituted into the messages")
    parser_run.set_defaults(func=cmd_run)

    # augmentor-chatgpt models
    parser_models = subparsers.add_parser("models", help="List available models")
    _add_common_arguments(parser_models)
    parser_models.set_defaults(func=cmd_models)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
