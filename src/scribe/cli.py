"""Command-line interface for scribe."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from . import __version__, config, config_constants, workflow
from .exceptions import (
    ActionNotFoundError,
    ConfigError,
    ConfigValidationError,
    RemoteError,
    UsageError,
)
from .providers.openai_provider import OpenAIProvider
from .registry import ActionRegistry
from .utils.redaction import mask_secret

_LOGGER = logging.getLogger(__name__)

ProviderFactory = Callable[..., OpenAIProvider]

EPILOG = """\
examples:
  # Basic transcription
  scribe -k YOUR_API_KEY meeting.mp3

  # Transcribe with meeting summary
  scribe --action openai-meeting-summary meeting.mp3

  # Apply several actions in one run
  scribe --action openai-action-items,openai-standup standup.mp3

  # Custom transcript file name
  scribe -o transcript.txt audio.mp3

  # List all available post-processing actions
  scribe --list-actions

  # Process existing transcript file
  scribe --transcript meeting-transcript.txt --action openai-meeting-summary

  # Store API key in config file
  scribe --set-key YOUR_API_KEY

  # Reset config to defaults
  scribe --init

  # Use custom config file
  scribe --config my-actions.yml --action custom-action audio.mp3

output files:
  <filename>-transcript.txt      Raw transcription
  <filename>-<action-id>.txt     Post-processed output (if --action used)

configuration:
  Config file: ~/.scribe/config.yml (or $SCRIBE_CONFIG)
  - Store your OpenAI API key (openai_api_key field)
  - Customize or add your own post-processing actions

popular actions:
  openai-meeting-summary      Comprehensive meeting summary
  openai-action-items         Extract action items and tasks
  openai-tech-meeting         Technical meeting summary
  openai-one-on-one           1:1 meeting notes
  openai-executive-brief      Executive summary
"""


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Add input/output arguments to parser.

    Args:
        parser: Argument parser to add arguments to
    """
    parser.add_argument("audio_file", nargs="?", default=None, help="Audio file to transcribe")
    parser.add_argument(
        "--transcript",
        default=None,
        help="Process existing transcript file (skips transcription)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Transcript file name (default: <audio_file>-transcript.txt)",
    )
    parser.add_argument(
        "--action",
        default=None,
        help="Post-processing action ID, or comma-separated IDs (see --list-actions)",
    )
    parser.add_argument("-k", "--api-key", default=None, help="OpenAI API key")


def _add_config_arguments(parser: argparse.ArgumentParser) -> None:
    """Add configuration management arguments to parser.

    Args:
        parser: Argument parser to add arguments to
    """
    group = parser.add_argument_group("Configuration")
    group.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file with post-actions (default: ~/.scribe/config.yml)",
    )
    group.add_argument(
        "--list-actions",
        action="store_true",
        help="List available post-processing actions and exit",
    )
    group.add_argument(
        "--init",
        action="store_true",
        help="Reset config file to defaults (asks before overwriting)",
    )
    group.add_argument(
        "-y", "--yes", action="store_true", help="Do not ask for confirmation with --init"
    )
    group.add_argument("--set-key", default=None, help="Store OpenAI API key in config file")


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    """Add logging arguments to parser.

    Args:
        parser: Argument parser to add arguments to
    """
    parser.add_argument(
        "--log-level",
        default=config.DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=config_constants.VALID_LOG_LEVELS,
        help="Logging level (e.g., DEBUG, INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path to log file (logs will be written to both console and file)",
    )
    parser.add_argument("--version", action="store_true", help="Show program version and exit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scribe",
        description="AI-powered audio transcription with OpenAI Whisper and "
        "configurable post-processing actions.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_input_arguments(parser)
    _add_config_arguments(parser)
    _add_logging_arguments(parser)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    args = build_parser().parse_args(argv)
    if args.version:
        print(f"scribe {__version__}")
        raise SystemExit(0)
    return args


def validate_args(args: argparse.Namespace) -> None:
    """Validate argument combinations and raise UsageError when invalid."""
    errors: List[str] = []

    if args.init and args.set_key is not None:
        errors.append("--init and --set-key cannot be used together")
    if args.set_key is not None and not args.set_key.strip():
        errors.append("--set-key requires a non-empty API key")

    if not (args.init or args.set_key is not None or args.list_actions):
        if args.transcript:
            if args.audio_file:
                errors.append("Provide either an audio file or --transcript, not both")
            if not workflow.parse_action_ids(args.action):
                errors.append("--action is required when using --transcript")
        elif not args.audio_file:
            errors.append(
                "Audio file path is required\n"
                "  Usage: scribe [options] <audio_file>\n"
                "     or: scribe --transcript <transcript_file> --action <action_id>"
            )

    if errors:
        raise UsageError("\n  ".join(errors))


def _require_api_key(cli_key: Optional[str], config_key: Optional[str]) -> str:
    api_key = config.resolve_openai_api_key(cli_key, config_key)
    if not api_key:
        raise UsageError(
            "OpenAI API key required",
            suggestion="Use -k, --set-key, or set the OPENAI_API_KEY environment variable",
        )
    return api_key


def _confirm_overwrite(path: Path) -> bool:
    """Ask on stdin before overwriting an existing config."""
    print(f"Warning: This will overwrite your existing config at: {path}")
    try:
        response = input("Continue? [y/N] ")
    except EOFError:
        return False
    return response.strip().lower() in ("y", "yes")


def _log_next_steps(log: logging.Logger) -> None:
    log.info("You can now:")
    log.info("  1. Edit the config file to customize your actions")
    log.info("  2. Use: scribe --list-actions to see all available actions")
    log.info("  3. Use: scribe --action openai-meeting-summary audio.mp3")


def _print_actions(registry: ActionRegistry) -> None:
    print("Available post-processing actions:")
    print()
    for action in registry.list():
        print(f"ID: {action.id}")
        print(f"Name: {action.name}")
        print(f"Description: {action.description}")
        print(f"Model: {action.model}")
        print("-" * config_constants.SEPARATOR_WIDTH)


def _print_summary(result: workflow.RunResult, api_key: str) -> None:
    print("=" * config_constants.SEPARATOR_WIDTH)
    print("Summary:")
    if result.audio_path:
        print(f"  Audio file: {result.audio_path}")
    print(f"  Transcript: {result.transcript_path}")
    for outcome in result.outcomes:
        if outcome.succeeded:
            print(f"  Processed:  {outcome.output_path} ({outcome.action.name})")
        else:
            print(f"  Failed:     {outcome.action.id} ({outcome.error})")
    print(f"  API key:    {mask_secret(api_key)}")
    print("=" * config_constants.SEPARATOR_WIDTH)


def _print_transcript(result: workflow.RunResult) -> None:
    transcript = result.transcript
    if result.audio_path:
        print("\nRaw transcript:")
        print("-" * config_constants.SEPARATOR_WIDTH)
        print(transcript)
        return

    limit = config_constants.TRANSCRIPT_PREVIEW_CHARS
    print(f"\nTranscript preview (first {limit} chars):")
    print("-" * config_constants.SEPARATOR_WIDTH)
    print(transcript[:limit] + "..." if len(transcript) > limit else transcript)


def _run_config_command(args: argparse.Namespace, cfg_path: Path, log: logging.Logger) -> int:
    """Handle --set-key and --init."""
    try:
        if args.set_key is not None:
            config.store_api_key(args.set_key.strip(), cfg_path)
            log.info("You can now use scribe without the -k flag:")
            log.info("  scribe audio.mp3")
            log.info("  scribe --action openai-meeting-summary meeting.mp3")
            return 0

        confirm = None if args.yes else _confirm_overwrite
        if config.reset_config(cfg_path, confirm=confirm):
            _log_next_steps(log)
        return 0
    except ConfigError as exc:
        log.error("Error updating config file: %s", exc)
        return 1
    except OSError as exc:
        log.error("Error writing config file: %s", exc)
        return 1


def _run(
    args: argparse.Namespace,
    provider_factory: ProviderFactory,
    log: logging.Logger,
) -> int:
    """Run the command selected by ``args``; returns an exit status code."""
    try:
        validate_args(args)
    except UsageError as exc:
        log.error("Error: %s", exc)
        return 1

    cfg_path, is_default_path = config.resolve_config_path(args.config)

    if args.set_key is not None or args.init:
        return _run_config_command(args, cfg_path, log)

    registry = ActionRegistry()
    try:
        if is_default_path and config.ensure_config(cfg_path):
            _log_next_steps(log)
        config_key = config.load_config_actions(cfg_path, registry)
    except ConfigValidationError as exc:
        log.error("Error loading config file: config validation failed: %s", exc)
        return 1
    except ConfigError as exc:
        log.error("Error loading config file: %s", exc)
        return 1
    except OSError as exc:
        log.error("Error creating default config: %s", exc)
        return 1

    if args.list_actions:
        _print_actions(registry)
        return 0

    # Every requested id is resolved before the first remote call
    try:
        actions = workflow.resolve_actions(registry, workflow.parse_action_ids(args.action))
        api_key = _require_api_key(args.api_key, config_key)
    except (ActionNotFoundError, UsageError) as exc:
        log.error("Error: %s", exc)
        return 1
    if not args.api_key and config_key:
        log.info("Using API key from config file")

    provider = provider_factory(api_key=api_key, api_base=config.resolve_openai_api_base())

    try:
        if args.transcript:
            result = workflow.run_transcript(provider, args.transcript, actions)
        else:
            result = workflow.run_audio(provider, args.audio_file, actions, args.output)
    except (UsageError, RemoteError) as exc:
        log.error("Error: %s", exc)
        return 1
    except OSError as exc:
        log.error("Error: %s", exc)
        return 1

    if result.outcomes and not result.partial:
        log.info("Post-processing completed successfully!")

    _print_summary(result, api_key)
    _print_transcript(result)
    return 0


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    provider_factory: Optional[ProviderFactory] = None,
    apply_log_level_fn: Optional[Callable[[str, Optional[str]], None]] = None,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Entry point for the CLI; returns an exit status code."""
    log = logger or _LOGGER
    if provider_factory is None:
        provider_factory = OpenAIProvider
    if apply_log_level_fn is None:
        apply_log_level_fn = workflow.apply_log_level

    args = parse_args(argv)

    try:
        apply_log_level_fn(args.log_level, args.log_file)
    except (ValueError, OSError) as exc:
        log.error("Error: %s", exc)
        return 1

    try:
        return _run(args, provider_factory, log)
    except KeyboardInterrupt:
        log.error("Interrupted")
        return 130


if __name__ == "__main__":  # pragma: no cover - script entry
    raise SystemExit(main())
