"""OpenAI provider for transcription and transcript post-processing.

This module provides a single OpenAIProvider class wrapping the two remote
calls scribe makes:
- Whisper API transcription (one multipart upload per audio file)
- Chat completion with an action's prompt, model and sampling parameters

Both calls are made once, synchronously, with the SDK's automatic retries
turned off. Failures are raised as ``RemoteError``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import openai
from openai import OpenAI

from .. import config_constants, prompt_store
from ..exceptions import RemoteError
from ..models import PostAction

logger = logging.getLogger(__name__)

TRANSCRIPTION_PROVIDER = "OpenAI/Transcription"
COMPLETION_PROVIDER = "OpenAI/Completion"


def _remote_error(action: str, provider: str, exc: Exception) -> RemoteError:
    """Map an OpenAI SDK exception to RemoteError."""
    if isinstance(exc, openai.APIStatusError):
        return RemoteError(
            f"{action} failed",
            provider=provider,
            status_code=exc.status_code,
            body=exc.response.text,
        )
    return RemoteError(f"{action} failed: {exc}", provider=provider)


class OpenAIProvider:
    """OpenAI API client for transcription and chat completion.

    Example:
        >>> provider = OpenAIProvider(api_key="sk-...")
        >>> text = provider.transcribe("meeting.mp3")
        >>> summary = provider.process_transcript(text, action)
    """

    def __init__(
        self,
        api_key: str,
        api_base: Optional[str] = None,
        transcription_model: str = config_constants.DEFAULT_OPENAI_TRANSCRIPTION_MODEL,
    ):
        """Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key (sent as bearer credential)
            api_base: Optional custom base URL (for mock servers)
            transcription_model: Model name sent with the transcription upload

        Raises:
            ValueError: If the API key is empty
        """
        if not api_key:
            raise ValueError(
                "OpenAI API key required. Use -k, --set-key, or set the OPENAI_API_KEY "
                "environment variable."
            )

        client_kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": 0}
        if api_base:
            client_kwargs["base_url"] = api_base
        self.client = OpenAI(**client_kwargs)
        self.transcription_model = transcription_model

    def transcribe(self, audio_path: str) -> str:
        """Transcribe an audio file with the Whisper API.

        Args:
            audio_path: Path to the audio file

        Returns:
            Transcript text

        Raises:
            FileNotFoundError: If the audio file doesn't exist
            RemoteError: If the API call fails
        """
        if not os.path.exists(audio_path):
            raise FileNotFoundError(f"Audio file not found: {audio_path}")

        logger.debug(
            "Transcribing audio file via OpenAI API: %s (model: %s)",
            audio_path,
            self.transcription_model,
        )

        try:
            with open(audio_path, "rb") as audio_file:
                # When response_format="text", the SDK returns str directly
                transcript = self.client.audio.transcriptions.create(
                    model=self.transcription_model,
                    file=audio_file,
                    response_format="text",
                )
        except openai.APIError as exc:
            logger.debug("OpenAI Whisper API error: %s", exc)
            raise _remote_error("Transcription", TRANSCRIPTION_PROVIDER, exc) from exc

        text = transcript if isinstance(transcript, str) else str(transcript)
        logger.debug("OpenAI transcription completed: %d characters", len(text))
        return text

    def complete(self, prompt: str, model: str, temperature: float, max_tokens: int) -> str:
        """Send a single user message to the chat completion API.

        Returns:
            Content of the first choice (empty string if the model returned none)

        Raises:
            RemoteError: If the API call fails or the response has no choices
        """
        logger.debug(
            "Requesting chat completion (model: %s, temperature: %.2f, max_tokens: %d)",
            model,
            temperature,
            max_tokens,
        )
        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except openai.APIError as exc:
            logger.debug("OpenAI chat completion error: %s", exc)
            raise _remote_error("Completion", COMPLETION_PROVIDER, exc) from exc

        if not response.choices:
            raise RemoteError("no response from API", provider=COMPLETION_PROVIDER)

        content = response.choices[0].message.content or ""
        logger.debug("OpenAI completion returned %d characters", len(content))
        return content

    def process_transcript(self, transcript: str, action: PostAction) -> str:
        """Apply ``action`` to ``transcript`` and return the generated text."""
        prompt = prompt_store.build_post_process_prompt(action.prompt, transcript)
        return self.complete(
            prompt,
            model=action.model,
            temperature=action.temperature,
            max_tokens=action.max_tokens,
        )
