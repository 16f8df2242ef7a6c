from __future__ import annotations

import logging
import os
import time

from .. import config_constants

logger = logging.getLogger(__name__)


def strip_extension(path: str) -> str:
    """Return ``path`` without its final extension (``a/b.mp3`` -> ``a/b``)."""
    root, _ = os.path.splitext(path)
    return root


def build_transcript_path(audio_path: str, override: str | None = None) -> str:
    """Return where the raw transcript of ``audio_path`` is written.

    ``meeting.mp3`` -> ``meeting-transcript.txt`` unless ``override`` is given.
    """
    if override:
        return override
    return (
        strip_extension(audio_path)
        + config_constants.TRANSCRIPT_SUFFIX
        + config_constants.OUTPUT_EXTENSION
    )


def build_action_output_path(source_path: str, action_id: str) -> str:
    """Return where the output of ``action_id`` applied to ``source_path`` is written.

    ``meeting.mp3`` + ``openai-standup`` -> ``meeting-openai-standup.txt``. The id is
    used as written, so distinct ids always map to distinct files.
    """
    return (
        f"{strip_extension(source_path)}-{action_id}"
        f"{config_constants.OUTPUT_EXTENSION}"
    )


def write_text_file(path: str, text: str) -> None:
    """Persist text to disk as UTF-8, creating parent directories as needed."""
    write_start = time.time()
    data = text.encode("utf-8")

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "wb") as handle:
        handle.write(data)

    logger.debug(
        "[STORAGE I/O] file=%s bytes=%d elapsed=%.3fs",
        path,
        len(data),
        time.time() - write_start,
    )


def read_text_file(path: str) -> str:
    """Read a UTF-8 text file."""
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()
