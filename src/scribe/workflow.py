"""Run orchestration: transcription, persistence and post-processing.

A run is strictly sequential. The transcript is obtained (from the Whisper API
or an existing file) and written to disk before any post-processing call is
made, so a failing completion never loses the transcript. Each requested
action is then applied in order; a failed action is recorded and the run moves
on to the next one.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .exceptions import RemoteError, UsageError
from .models import PostAction
from .providers.openai_provider import OpenAIProvider
from .registry import ActionRegistry
from .utils import filesystem

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class ActionOutcome:
    """Result of applying one action to a transcript.

    Attributes:
        action: The applied action
        output_path: Where the output was (or would have been) written
        error: Error message if the action failed, None otherwise
    """

    action: PostAction
    output_path: str
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class RunResult:
    """Result of a scribe run.

    Attributes:
        transcript: Transcript text that was post-processed
        transcript_path: File holding the transcript
        audio_path: Source audio file, None when an existing transcript was used
        outcomes: One entry per requested action, in request order
    """

    transcript: str
    transcript_path: str
    audio_path: Optional[str] = None
    outcomes: List[ActionOutcome] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        """True when at least one action failed (the transcript is still saved)."""
        return any(not outcome.succeeded for outcome in self.outcomes)


def apply_log_level(level: str, log_file: Optional[str] = None) -> None:
    """Apply logging level to root logger and configure handlers.

    Args:
        level: Log level string (e.g., 'DEBUG', 'INFO', 'WARNING')
        log_file: Optional path to log file. If provided, logs will be written to both
                  console and file.

    Raises:
        ValueError: If log level is invalid
        OSError: If log file cannot be created or written to
    """
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    root_logger = logging.getLogger()

    if not root_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(console_handler)
        root_logger.setLevel(numeric_level)
    else:
        # Update existing handlers
        root_logger.setLevel(numeric_level)
        for handler in root_logger.handlers:
            handler.setLevel(numeric_level)

    if log_file:
        file_handler_exists = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(log_file)
            for h in root_logger.handlers
        )

        if not file_handler_exists:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root_logger.addHandler(file_handler)
            logger.info("Logging to file: %s", log_file)

    logger.setLevel(numeric_level)


def parse_action_ids(value: Optional[str]) -> List[str]:
    """Split a comma-joined ``--action`` value into ids (order kept, duplicates dropped)."""
    if not value:
        return []
    ids = [part.strip() for part in value.split(",") if part.strip()]
    return list(dict.fromkeys(ids))


def resolve_actions(registry: ActionRegistry, action_ids: Iterable[str]) -> List[PostAction]:
    """Look up every requested id before any remote call is made.

    Raises:
        ActionNotFoundError: For the first id that is not registered
    """
    return [registry.get(action_id) for action_id in action_ids]


def apply_actions(
    provider: OpenAIProvider,
    transcript: str,
    actions: Sequence[PostAction],
    source_path: str,
) -> List[ActionOutcome]:
    """Apply each action to the transcript and write its output file.

    Remote and write failures are logged and recorded, not raised.
    """
    outcomes: List[ActionOutcome] = []
    for action in actions:
        output_path = filesystem.build_action_output_path(source_path, action.id)
        logger.info("Applying post-processing: %s...", action.name)

        try:
            processed = provider.process_transcript(transcript, action)
        except RemoteError as exc:
            logger.warning("Post-processing failed: %s", exc)
            outcomes.append(ActionOutcome(action=action, output_path=output_path, error=str(exc)))
            continue

        try:
            filesystem.write_text_file(output_path, processed)
        except OSError as exc:
            logger.error("Error writing processed file: %s", exc)
            outcomes.append(ActionOutcome(action=action, output_path=output_path, error=str(exc)))
            continue

        logger.info("Post-processed output saved to %s", output_path)
        outcomes.append(ActionOutcome(action=action, output_path=output_path))
    return outcomes


def run_audio(
    provider: OpenAIProvider,
    audio_path: str,
    actions: Sequence[PostAction] = (),
    output_path: Optional[str] = None,
) -> RunResult:
    """Transcribe ``audio_path``, save the transcript, then apply ``actions``.

    Args:
        provider: OpenAI provider
        audio_path: Audio file to transcribe
        actions: Actions to apply, already resolved
        output_path: Optional transcript path override

    Returns:
        RunResult describing the saved files

    Raises:
        UsageError: If the audio file does not exist
        RemoteError: If transcription fails
        OSError: If the transcript cannot be written
    """
    if not os.path.exists(audio_path):
        raise UsageError(f"Audio file '{audio_path}' not found")

    transcript_path = filesystem.build_transcript_path(audio_path, output_path)

    logger.info("Transcribing audio...")
    transcript = provider.transcribe(audio_path)

    filesystem.write_text_file(transcript_path, transcript)
    logger.info("Raw transcript saved to %s", transcript_path)

    outcomes = apply_actions(provider, transcript, actions, audio_path)
    result = RunResult(
        transcript=transcript,
        transcript_path=transcript_path,
        audio_path=audio_path,
        outcomes=outcomes,
    )
    if result.partial:
        logger.warning("Only raw transcript was saved for failed action(s).")
    return result


def run_transcript(
    provider: OpenAIProvider,
    transcript_path: str,
    actions: Sequence[PostAction],
) -> RunResult:
    """Apply ``actions`` to an existing transcript file.

    Raises:
        UsageError: If no action is requested, or the transcript file does not
            exist or is not UTF-8 text
        OSError: If the transcript cannot be read
    """
    if not actions:
        raise UsageError("--action is required when using --transcript")
    if not os.path.exists(transcript_path):
        raise UsageError(f"Transcript file '{transcript_path}' not found")

    try:
        transcript = filesystem.read_text_file(transcript_path)
    except UnicodeDecodeError as exc:
        raise UsageError(f"Transcript file '{transcript_path}' is not valid UTF-8") from exc
    logger.info("Loaded transcript from %s", transcript_path)

    outcomes = apply_actions(provider, transcript, actions, transcript_path)
    return RunResult(
        transcript=transcript,
        transcript_path=transcript_path,
        outcomes=outcomes,
    )
