from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, ValidationError

from . import config_constants, defaults
from .exceptions import ConfigParseError, ConfigReadError
from .models import PostAction
from .registry import ActionRegistry
from .validation import validate_config

logger = logging.getLogger(__name__)


def _is_test_environment() -> bool:
    """Check if we're running in a test environment."""
    if "pytest" in sys.modules or "PYTEST_CURRENT_TEST" in os.environ:
        return True
    if os.environ.get("TESTING", "").lower() in ("1", "true", "yes"):
        return True
    return False


# Load .env from the working directory so OPENAI_API_KEY can live there.
# Tests set environment variables explicitly and never rely on .env files.
if not _is_test_environment():
    try:
        load_dotenv(override=False)
    except (PermissionError, OSError):
        # Continue without .env file
        pass

# Re-exported for convenience
DEFAULT_LOG_LEVEL = config_constants.DEFAULT_LOG_LEVEL
DEFAULT_CONFIG_DIR_NAME = config_constants.DEFAULT_CONFIG_DIR_NAME
DEFAULT_CONFIG_FILENAME = config_constants.DEFAULT_CONFIG_FILENAME
CONFIG_PATH_ENV_VAR = config_constants.CONFIG_PATH_ENV_VAR
DEFAULT_OPENAI_TRANSCRIPTION_MODEL = config_constants.DEFAULT_OPENAI_TRANSCRIPTION_MODEL
VALID_ACTION_TYPES = config_constants.VALID_ACTION_TYPES
KNOWN_OPENAI_MODELS = config_constants.KNOWN_OPENAI_MODELS


class Config(BaseModel):
    """On-disk configuration: the OpenAI credential and the action catalogue.

    This Pydantic model only checks the *shape* of the document (types and
    coercion). Semantic rules (required fields, unique ids, value ranges) are
    enforced by ``validation.validate_config`` so that errors are reported in a
    fixed order. The model is immutable (frozen) after creation; use
    ``model_copy(update=...)`` to derive a modified config.

    Attributes:
        openai_api_key: OpenAI API key, may be empty.
        post_actions: Actions in declaration order.

    Example:
        >>> from scribe import config
        >>> cfg = config.load_config_file("~/.scribe/config.yml")
        >>> [action.id for action in cfg.post_actions][:2]
        ['openai-meeting-summary', 'openai-action-items']
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    openai_api_key: str = ""
    post_actions: List[PostAction] = Field(default_factory=list)

    @field_validator("openai_api_key", mode="before")
    @classmethod
    def _coerce_api_key(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value

    @field_validator("post_actions", mode="before")
    @classmethod
    def _coerce_post_actions(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class _ConfigDumper(yaml.SafeDumper):
    """SafeDumper that indents sequences and writes multi-line strings as blocks."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


_ConfigDumper.add_representer(str, _represent_str)


def default_config_path() -> Path:
    """Return ``~/.scribe/config.yml`` for the current user."""
    return Path.home() / DEFAULT_CONFIG_DIR_NAME / DEFAULT_CONFIG_FILENAME


def resolve_config_path(path: Optional[str] = None) -> Tuple[Path, bool]:
    """Pick the config file to use.

    Args:
        path: Explicit path (e.g. from ``--config``), takes precedence

    Returns:
        Tuple of (path, is_default). ``is_default`` is True only when neither
        an explicit path nor ``SCRIBE_CONFIG`` was given.
    """
    if path:
        return Path(path).expanduser(), False
    env_path = os.getenv(CONFIG_PATH_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path).expanduser(), False
    return default_config_path(), True


def _format_shape_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def read_config_text(path: str | Path) -> str:
    """Read the raw config file content.

    Raises:
        ConfigReadError: If the file is missing or cannot be read
        ConfigParseError: If the file is not valid UTF-8
    """
    cfg_path = Path(path).expanduser()
    try:
        return cfg_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(
            f"failed to parse YAML config {cfg_path}: {exc}", path=str(cfg_path)
        ) from exc
    except OSError as exc:
        raise ConfigReadError(
            f"failed to read config file {cfg_path}: {exc}", path=str(cfg_path)
        ) from exc


def parse_config(text: str, path: Optional[str] = None) -> Config:
    """Deserialize YAML text into a Config without semantic validation.

    Raises:
        ConfigParseError: If the text is not YAML or does not have the Config shape
    """
    source = path or "<string>"
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"failed to parse YAML config {source}: {exc}", path=path) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"failed to parse YAML config {source}: top level must be a mapping", path=path
        )

    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigParseError(
            f"failed to parse YAML config {source}: {_format_shape_errors(exc)}", path=path
        ) from exc


def load_config_file(path: str | Path) -> Config:
    """Read and parse a config file (no semantic validation).

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigParseError: If the content is malformed
    """
    cfg_path = Path(path).expanduser()
    return parse_config(read_config_text(cfg_path), path=str(cfg_path))


def load_config_actions(path: str | Path, registry: ActionRegistry) -> str:
    """Load, validate and register the actions from a config file.

    The registry is only touched after validation succeeds, and then its whole
    content is replaced.

    Args:
        path: Config file path
        registry: Registry to fill

    Returns:
        The ``openai_api_key`` stored in the file (may be empty)

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigParseError: If the content is malformed
        ConfigValidationError: If a validation rule is violated
    """
    cfg = load_config_file(path)
    validate_config(cfg)
    registry.replace(cfg.post_actions)
    logger.info("Loaded %d action(s) from config file", len(cfg.post_actions))
    return cfg.openai_api_key


def dump_config(cfg: Config) -> str:
    """Serialize a Config to YAML, preserving field and action order."""
    return yaml.dump(
        cfg.model_dump(),
        Dumper=_ConfigDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(text), path)


def save_config(cfg: Config, path: str | Path) -> Path:
    """Write the whole Config to ``path``, creating parent directories."""
    cfg_path = Path(path).expanduser()
    _write_text(cfg_path, dump_config(cfg))
    return cfg_path


def write_default_config(path: str | Path) -> Path:
    """Write the built-in config template to ``path`` (overwrites)."""
    cfg_path = Path(path).expanduser()
    _write_text(cfg_path, defaults.default_config_content())
    logger.info("Created default config file at: %s", cfg_path)
    return cfg_path


def ensure_config(path: str | Path) -> bool:
    """Create the default config at ``path`` if it does not exist.

    Returns:
        True if a new file was written
    """
    cfg_path = Path(path).expanduser()
    if cfg_path.exists():
        return False
    logger.info("Config file not found. Creating default config...")
    write_default_config(cfg_path)
    return True


def reset_config(path: str | Path, confirm: Optional[Callable[[Path], bool]] = None) -> bool:
    """Overwrite ``path`` with the default config.

    Args:
        path: Config file path
        confirm: Called with the path when a config already exists; returning
            False cancels the reset. None means no confirmation.

    Returns:
        True if the file was (re)written, False if the user cancelled
    """
    cfg_path = Path(path).expanduser()
    if cfg_path.exists() and confirm is not None and not confirm(cfg_path):
        logger.info("Config reset cancelled.")
        return False
    write_default_config(cfg_path)
    logger.info("Config file reset to defaults")
    return True


def store_api_key(api_key: str, path: str | Path) -> Path:
    """Store ``api_key`` in the config file, creating the file if needed.

    The existing config is parsed (not validated), the credential replaced and
    the whole document rewritten. Comments in the file are not preserved.

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigParseError: If the existing content is malformed
    """
    cfg_path = Path(path).expanduser()
    ensure_config(cfg_path)
    cfg = load_config_file(cfg_path)
    updated = cfg.model_copy(update={"openai_api_key": api_key})
    save_config(updated, cfg_path)
    logger.info("API key stored successfully in: %s", cfg_path)
    return cfg_path


def resolve_openai_api_key(cli_key: Optional[str], config_key: Optional[str]) -> Optional[str]:
    """Pick the credential: CLI flag, then config file, then OPENAI_API_KEY."""
    for candidate in (cli_key, config_key, os.getenv("OPENAI_API_KEY")):
        if candidate and candidate.strip():
            return candidate.strip()
    return None


def resolve_openai_api_base() -> Optional[str]:
    """Return OPENAI_API_BASE if set (used to point at mock servers)."""
    env_base = os.getenv("OPENAI_API_BASE")
    if env_base:
        return env_base.strip() or None
    return None
