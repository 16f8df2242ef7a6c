"""Shared fixtures and test utilities for scribe tests.

This module contains:
- Test constants
- Helper functions for creating actions, configs and config files
- Helpers for building real OpenAI SDK exceptions without network access

All test files can import from this module using pytest's conftest.py mechanism.
"""

import os

# Keep .env files and user config out of test runs
os.environ["TESTING"] = "1"

from pathlib import Path
from unittest.mock import Mock

import httpx
import openai
import yaml

from scribe import config, models

# Test constants
TEST_API_KEY = "sk-test-abcdefghijklmnop1234"
TEST_ACTION_ID = "summary"
TEST_MODEL = "gpt-4o-mini"
TEST_PROMPT = "Summarize the transcript."
TEST_TRANSCRIPT = "Alice: we ship on Friday.\nBob: I will write the release notes."
TEST_API_URL = "https://api.openai.com/v1/chat/completions"


# Test helper functions
def create_test_action(**overrides):
    """Create a valid PostAction with defaults.

    Args:
        **overrides: Fields to override from defaults

    Returns:
        models.PostAction
    """
    values = {
        "id": TEST_ACTION_ID,
        "name": "Summary",
        "description": "Summarize the transcript",
        "type": "openai",
        "prompt": TEST_PROMPT,
        "model": TEST_MODEL,
        "temperature": 0.3,
        "max_tokens": 500,
    }
    values.update(overrides)
    return models.PostAction(**values)


def create_test_config(actions=None, api_key=""):
    """Create a Config holding ``actions`` (one default action when None)."""
    if actions is None:
        actions = [create_test_action()]
    return config.Config(openai_api_key=api_key, post_actions=list(actions))


def write_config_file(directory, data, filename="config.yml"):
    """Write ``data`` to ``directory/filename`` and return the path.

    ``data`` is dumped as YAML unless it is already a string.
    """
    path = Path(directory) / filename
    text = data if isinstance(data, str) else yaml.safe_dump(data, sort_keys=False)
    path.write_text(text, encoding="utf-8")
    return path


def action_dict(**overrides):
    """Return a plain-dict action as it would appear in a YAML file."""
    return create_test_action(**overrides).model_dump()


def create_api_status_error(status_code, body, url=TEST_API_URL):
    """Build a real openai.APIStatusError subclass for ``status_code``."""
    request = httpx.Request("POST", url)
    response = httpx.Response(status_code, request=request, text=body)
    return openai.APIStatusError(f"Error code: {status_code}", response=response, body=None)


def create_api_connection_error(url=TEST_API_URL):
    """Build a real openai.APIConnectionError."""
    return openai.APIConnectionError(request=httpx.Request("POST", url))


def create_chat_response(content="Processed output"):
    """Create a chat completion response double with a single choice."""
    message = Mock()
    message.content = content
    choice = Mock()
    choice.message = message
    response = Mock()
    response.choices = [choice]
    return response
