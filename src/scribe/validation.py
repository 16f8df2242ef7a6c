"""Semantic validation of a loaded Config.

The checks run in a fixed order and the first violation wins, so the same
broken file always produces the same error message. Unknown model names never
fail validation; they are returned as warnings.
"""

from __future__ import annotations

import logging
from typing import List, Set, TYPE_CHECKING

from . import config_constants
from .exceptions import ConfigValidationError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import Config
    from .models import PostAction

logger = logging.getLogger(__name__)

# Checked for emptiness after the id, in this order
REQUIRED_FIELDS = ("name", "type", "prompt", "model")


def _check_required_fields(action: "PostAction", index: int) -> None:
    if not action.id:
        raise ConfigValidationError(
            f"action at index {index} is missing 'id' field",
            rule="missing_field",
            action_index=index,
            field="id",
        )
    for field_name in REQUIRED_FIELDS:
        if not getattr(action, field_name):
            raise ConfigValidationError(
                f"action '{action.id}' is missing '{field_name}' field",
                rule="missing_field",
                action_id=action.id,
                action_index=index,
                field=field_name,
            )


def _check_values(action: "PostAction", index: int) -> None:
    if action.type not in config_constants.VALID_ACTION_TYPES:
        valid = ", ".join(config_constants.VALID_ACTION_TYPES)
        raise ConfigValidationError(
            f"action '{action.id}' has invalid type '{action.type}' (valid: {valid})",
            rule="invalid_type",
            action_id=action.id,
            action_index=index,
            value=action.type,
        )

    # Written as a negated range check so NaN is rejected too
    if not (
        config_constants.MIN_TEMPERATURE <= action.temperature <= config_constants.MAX_TEMPERATURE
    ):
        raise ConfigValidationError(
            f"action '{action.id}' has invalid temperature {action.temperature:.2f} "
            "(must be between 0 and 2)",
            rule="temperature_range",
            action_id=action.id,
            action_index=index,
            value=action.temperature,
        )

    if action.max_tokens <= 0:
        raise ConfigValidationError(
            f"action '{action.id}' has invalid max_tokens {action.max_tokens} (must be > 0)",
            rule="max_tokens_range",
            action_id=action.id,
            action_index=index,
            value=action.max_tokens,
        )


def validate_config(cfg: "Config") -> List[str]:
    """Validate a candidate Config.

    Checks, in order: the action list is non-empty; then for each action in
    declaration order: id, name, type, prompt and model are non-empty, the id
    has not been seen before, the type is a known provider tag, the temperature
    is within 0-2 and max_tokens is positive.

    Args:
        cfg: Config to validate

    Returns:
        Advisory warnings (unknown model names). Empty when everything is known.

    Raises:
        ConfigValidationError: On the first rule violation found
    """
    if not cfg.post_actions:
        raise ConfigValidationError(
            "no post-processing actions defined in config", rule="no_actions"
        )

    warnings: List[str] = []
    seen_ids: Set[str] = set()

    for index, action in enumerate(cfg.post_actions):
        _check_required_fields(action, index)

        if action.id in seen_ids:
            raise ConfigValidationError(
                f"duplicate action ID '{action.id}' found",
                rule="duplicate_id",
                action_id=action.id,
                action_index=index,
            )
        seen_ids.add(action.id)

        _check_values(action, index)

        if (
            action.type == config_constants.ACTION_TYPE_OPENAI
            and action.model not in config_constants.KNOWN_OPENAI_MODELS
        ):
            message = f"action '{action.id}' uses model '{action.model}' which may not be valid"
            logger.warning(message)
            warnings.append(message)

    return warnings
