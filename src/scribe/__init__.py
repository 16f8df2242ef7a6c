"""Scribe - transcribe audio with Whisper and post-process it with chat actions.

This package provides:
- Audio transcription through the OpenAI Whisper API
- Post-processing "actions" (summaries, action items, ...) defined in a YAML config
- A command-line tool, ``scribe``

Programmatic API Example:
    >>> import scribe
    >>> from scribe.providers import OpenAIProvider
    >>>
    >>> registry = scribe.ActionRegistry()
    >>> api_key = scribe.load_config_actions("~/.scribe/config.yml", registry)
    >>> provider = OpenAIProvider(api_key=api_key)
    >>> actions = [registry.get("openai-meeting-summary")]
    >>> result = scribe.run_audio(provider, "meeting.mp3", actions)
    >>> print(result.transcript_path)

CLI Usage:
    $ scribe --action openai-meeting-summary meeting.mp3
    $ python -m scribe --list-actions
"""

from __future__ import annotations

from .config import Config, load_config_actions, load_config_file
from .models import PostAction
from .registry import ActionRegistry
from .validation import validate_config
from .workflow import run_audio, run_transcript

__all__ = [
    "ActionRegistry",
    "Config",
    "PostAction",
    "load_config_actions",
    "load_config_file",
    "run_audio",
    "run_transcript",
    "validate_config",
    "__version__",
]

__version__ = "1.0.0"
