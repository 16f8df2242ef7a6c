"""Prompt template loading for post-processing requests.

Features:
- File-based prompts (Jinja2 templates shipped under ``scribe/prompts``)
- Loading by logical name (e.g. "post_process/user_v1")
- In-memory caching to avoid repeated disk I/O
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Template

_PROMPT_DIR = Path(__file__).resolve().parent / "prompts"

POST_PROCESS_PROMPT = "post_process/user_v1"


class PromptNotFoundError(FileNotFoundError):
    """Raised when a requested prompt template is not found on disk."""


@lru_cache(maxsize=None)
def _load_template(name: str) -> Template:
    """Load and cache a Jinja2 template by logical name.

    Example:
        name="post_process/user_v1" -> prompts/post_process/user_v1.j2

    Raises:
        PromptNotFoundError: If template file doesn't exist
    """
    # Allow both "post_process/user_v1" and "post_process/user_v1.j2"
    rel_path = Path(name) if name.endswith(".j2") else Path(name + ".j2")
    path = _PROMPT_DIR / rel_path

    if not path.exists():
        raise PromptNotFoundError(
            f"Prompt template not found: {path}\n"
            f"  Searched in: {_PROMPT_DIR}\n"
            f"  Requested name: {name}"
        )

    return Template(path.read_text(encoding="utf-8"))


def render_prompt(name: str, **params: Any) -> str:
    """Render a prompt template.

    Parameter values are inserted verbatim; only the template file's final
    newline is dropped.

    Args:
        name: Logical name, e.g. "post_process/user_v1"
        **params: Template parameters passed to Jinja2 .render()

    Raises:
        PromptNotFoundError: If template file doesn't exist
    """
    return _load_template(name).render(**params)


def build_post_process_prompt(instructions: str, transcript: str) -> str:
    """Compose the completion prompt for one action applied to a transcript."""
    return render_prompt(POST_PROCESS_PROMPT, instructions=instructions, transcript=transcript)
