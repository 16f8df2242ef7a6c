from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class PostAction(BaseModel):
    """A named post-processing recipe applied to a transcript.

    Actions are only ever built by deserializing configuration text and are
    immutable afterwards. Field presence and value ranges are not enforced here:
    missing strings default to ``""`` and missing numbers to ``0`` so that
    ``validation.validate_config`` can report every violation with a
    deterministic message.

    Attributes:
        id: Short unique token used on the command line and in output filenames.
        name: Human-readable label.
        description: Longer human-readable description.
        type: Provider tag (currently only "openai").
        prompt: Instruction text prepended to the transcript.
        model: Provider model identifier (e.g. "gpt-4o-mini").
        temperature: Sampling temperature, valid range 0-2.
        max_tokens: Cap on generated output length, must be positive.

    Example:
        >>> action = PostAction(
        ...     id="openai-standup",
        ...     name="Daily Standup Summary",
        ...     type="openai",
        ...     prompt="Summarize this standup meeting.",
        ...     model="gpt-3.5-turbo",
        ...     temperature=0.2,
        ...     max_tokens=800,
        ... )
    """

    model_config = ConfigDict(extra="ignore", frozen=True, protected_namespaces=())

    id: str = ""
    name: str = ""
    description: str = ""
    type: str = ""
    prompt: str = ""
    model: str = ""
    temperature: float = 0.0
    max_tokens: int = 0

    @field_validator("id", "name", "description", "type", "prompt", "model", mode="before")
    @classmethod
    def _coerce_string(cls, value: Any) -> Any:
        """Treat YAML nulls as empty strings; stringify scalars like ``id: 42``."""
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("temperature", "max_tokens", mode="before")
    @classmethod
    def _coerce_null_number(cls, value: Any) -> Any:
        if value is None:
            return 0
        return value
