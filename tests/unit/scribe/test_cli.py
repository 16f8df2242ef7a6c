#!/usr/bin/env python3
"""Tests for the scribe command-line interface."""

import contextlib
import importlib.util
import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from scribe import __version__, cli
from scribe.exceptions import RemoteError, UsageError

parent_tests_dir = Path(__file__).resolve().parents[2]
spec = importlib.util.spec_from_file_location("parent_conftest", parent_tests_dir / "conftest.py")
if spec is None or spec.loader is None:
    raise ImportError(f"Could not load conftest from {parent_tests_dir}")
parent_conftest = importlib.util.module_from_spec(spec)
spec.loader.exec_module(parent_conftest)

action_dict = parent_conftest.action_dict
write_config_file = parent_conftest.write_config_file
TEST_API_KEY = parent_conftest.TEST_API_KEY
TEST_TRANSCRIPT = parent_conftest.TEST_TRANSCRIPT


@pytest.mark.unit
class TestValidateArgs(unittest.TestCase):
    def test_audio_file_required(self):
        args = cli.parse_args([])
        with self.assertRaises(UsageError) as ctx:
            cli.validate_args(args)
        self.assertIn("Audio file path is required", str(ctx.exception))

    def test_transcript_requires_action(self):
        args = cli.parse_args(["--transcript", "t.txt"])
        with self.assertRaises(UsageError) as ctx:
            cli.validate_args(args)
        self.assertIn("--action is required when using --transcript", str(ctx.exception))

    def test_transcript_and_audio_conflict(self):
        args = cli.parse_args(["--transcript", "t.txt", "--action", "x", "a.mp3"])
        with self.assertRaises(UsageError):
            cli.validate_args(args)

    def test_config_commands_need_no_input(self):
        for argv in (["--list-actions"], ["--init"], ["--set-key", "sk-x"]):
            with self.subTest(argv=argv):
                cli.validate_args(cli.parse_args(argv))

    def test_init_and_set_key_conflict(self):
        with self.assertRaises(UsageError):
            cli.validate_args(cli.parse_args(["--init", "--set-key", "sk-x"]))

    def test_log_level_is_uppercased(self):
        self.assertEqual(cli.parse_args(["--log-level", "debug", "a.mp3"]).log_level, "DEBUG")

    def test_version(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), self.assertRaises(SystemExit) as ctx:
            cli.parse_args(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, stdout.getvalue())


class CliTestCase(unittest.TestCase):
    """Runs cli.main against a temporary config with a mocked provider."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.tmp = Path(self.temp_dir.name)

        env = {
            k: v
            for k, v in os.environ.items()
            if k not in ("OPENAI_API_KEY", "OPENAI_API_BASE", "SCRIBE_CONFIG")
        }
        env_patch = patch.dict(os.environ, env, clear=True)
        env_patch.start()
        self.addCleanup(env_patch.stop)

        self.config_path = write_config_file(
            self.tmp,
            {
                "openai_api_key": "",
                "post_actions": [
                    action_dict(id="summary", name="Summary", description="Short summary"),
                    action_dict(id="items", name="Action Items", model="gpt-4"),
                ],
            },
        )
        self.audio_path = self.tmp / "meeting.mp3"
        self.audio_path.write_bytes(b"audio")

        self.provider = Mock()
        self.provider.transcribe.return_value = TEST_TRANSCRIPT
        self.provider.process_transcript.return_value = "Processed"
        self.provider_factory = Mock(return_value=self.provider)

    def run_cli(self, *argv):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            code = cli.main(
                list(argv),
                provider_factory=self.provider_factory,
                apply_log_level_fn=Mock(),
            )
        return code, stdout.getvalue()


@pytest.mark.unit
class TestListActions(CliTestCase):
    def test_lists_actions_in_order(self):
        code, out = self.run_cli("--config", str(self.config_path), "--list-actions")
        self.assertEqual(code, 0)
        self.assertLess(out.index("ID: summary"), out.index("ID: items"))
        self.assertIn("Name: Action Items", out)
        self.assertIn("Description: Short summary", out)
        self.assertIn("Model: gpt-4", out)
        self.assertIn("-" * 70, out)
        self.provider_factory.assert_not_called()

    def test_invalid_config_is_fatal(self):
        bad = write_config_file(self.tmp, {"post_actions": []}, filename="bad.yml")
        with self.assertLogs("scribe.cli", level="ERROR") as logs:
            code, _ = self.run_cli("--config", str(bad), "--list-actions")
        self.assertEqual(code, 1)
        self.assertIn("no post-processing actions defined in config", logs.output[0])

    def test_missing_explicit_config_is_not_created(self):
        missing = self.tmp / "absent.yml"
        with self.assertLogs("scribe.cli", level="ERROR"):
            code, _ = self.run_cli("--config", str(missing), "--list-actions")
        self.assertEqual(code, 1)
        self.assertFalse(missing.exists())

    def test_default_config_is_bootstrapped(self):
        default_path = self.tmp / "home" / ".scribe" / "config.yml"
        with patch("scribe.config.default_config_path", return_value=default_path):
            code, out = self.run_cli("--list-actions")
        self.assertEqual(code, 0)
        self.assertTrue(default_path.exists())
        self.assertIn("ID: openai-meeting-summary", out)


@pytest.mark.unit
class TestAudioMode(CliTestCase):
    def test_transcribe_with_action(self):
        code, out = self.run_cli(
            "--config", str(self.config_path), "-k", TEST_API_KEY,
            "--action", "summary", str(self.audio_path),
        )
        self.assertEqual(code, 0)
        self.provider_factory.assert_called_once_with(api_key=TEST_API_KEY, api_base=None)
        transcript_path = self.tmp / "meeting-transcript.txt"
        output_path = self.tmp / "meeting-summary.txt"
        self.assertEqual(transcript_path.read_text(encoding="utf-8"), TEST_TRANSCRIPT)
        self.assertEqual(output_path.read_text(encoding="utf-8"), "Processed")
        self.assertIn(f"Transcript: {transcript_path}", out)
        self.assertIn("API key:    sk-...1234", out)
        self.assertNotIn(TEST_API_KEY, out)
        self.assertIn(TEST_TRANSCRIPT, out)

    def test_unknown_action_fails_before_any_remote_call(self):
        with self.assertLogs("scribe.cli", level="ERROR") as logs:
            code, _ = self.run_cli(
                "--config", str(self.config_path), "-k", TEST_API_KEY,
                "--action", "summary,nope", str(self.audio_path),
            )
        self.assertEqual(code, 1)
        self.assertIn("Unknown action 'nope'", logs.output[0])
        self.provider_factory.assert_not_called()
        self.assertFalse((self.tmp / "meeting-transcript.txt").exists())

    def test_missing_api_key(self):
        with self.assertLogs("scribe.cli", level="ERROR") as logs:
            code, _ = self.run_cli("--config", str(self.config_path), str(self.audio_path))
        self.assertEqual(code, 1)
        self.assertIn("OpenAI API key required", logs.output[0])
        self.provider_factory.assert_not_called()

    def test_api_key_from_config_file(self):
        config_path = write_config_file(
            self.tmp,
            {"openai_api_key": "sk-from-file-5678", "post_actions": [action_dict()]},
            filename="with-key.yml",
        )
        with self.assertLogs("scribe.cli", level="INFO") as logs:
            code, _ = self.run_cli("--config", str(config_path), str(self.audio_path))
        self.assertEqual(code, 0)
        self.provider_factory.assert_called_once_with(api_key="sk-from-file-5678", api_base=None)
        self.assertTrue(any("Using API key from config file" in line for line in logs.output))

    def test_api_key_from_environment(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-env-key-0000"}):
            code, _ = self.run_cli("--config", str(self.config_path), str(self.audio_path))
        self.assertEqual(code, 0)
        self.provider_factory.assert_called_once_with(api_key="sk-env-key-0000", api_base=None)

    def test_missing_audio_file(self):
        with self.assertLogs("scribe.cli", level="ERROR"):
            code, _ = self.run_cli(
                "--config", str(self.config_path), "-k", TEST_API_KEY, str(self.tmp / "x.mp3")
            )
        self.assertEqual(code, 1)

    def test_transcription_failure_is_fatal(self):
        self.provider.transcribe.side_effect = RemoteError(
            "Transcription failed", provider="OpenAI/Transcription", status_code=401, body="bad key"
        )
        with self.assertLogs("scribe.cli", level="ERROR") as logs:
            code, _ = self.run_cli(
                "--config", str(self.config_path), "-k", TEST_API_KEY, str(self.audio_path)
            )
        self.assertEqual(code, 1)
        self.assertIn("with status 401: bad key", logs.output[0])

    def test_post_processing_failure_is_not_fatal(self):
        self.provider.process_transcript.side_effect = RemoteError(
            "Completion failed", provider="OpenAI/Completion", status_code=500
        )
        code, out = self.run_cli(
            "--config", str(self.config_path), "-k", TEST_API_KEY,
            "--action", "summary", str(self.audio_path),
        )
        self.assertEqual(code, 0)
        self.assertTrue((self.tmp / "meeting-transcript.txt").exists())
        self.assertFalse((self.tmp / "meeting-summary.txt").exists())
        self.assertIn("Failed:", out)

    def test_keyboard_interrupt(self):
        self.provider.transcribe.side_effect = KeyboardInterrupt
        with self.assertLogs("scribe.cli", level="ERROR"):
            code, _ = self.run_cli(
                "--config", str(self.config_path), "-k", TEST_API_KEY, str(self.audio_path)
            )
        self.assertEqual(code, 130)


@pytest.mark.unit
class TestTranscriptMode(CliTestCase):
    def test_processes_existing_transcript(self):
        transcript_path = self.tmp / "notes.txt"
        transcript_path.write_text("x" * 600, encoding="utf-8")

        code, out = self.run_cli(
            "--config", str(self.config_path), "-k", TEST_API_KEY,
            "--transcript", str(transcript_path), "--action", "summary,items",
        )

        self.assertEqual(code, 0)
        self.provider.transcribe.assert_not_called()
        self.assertEqual(
            (self.tmp / "notes-summary.txt").read_text(encoding="utf-8"), "Processed"
        )
        self.assertTrue((self.tmp / "notes-items.txt").exists())
        self.assertIn("x" * 500 + "...", out)
        self.assertNotIn("x" * 501, out)
        self.assertNotIn("Audio file:", out)

    def test_non_utf8_transcript_is_reported(self):
        transcript_path = self.tmp / "latin1.txt"
        transcript_path.write_bytes(b"caf\xe9 meeting notes")

        with self.assertLogs("scribe.cli", level="ERROR") as logs:
            code, _ = self.run_cli(
                "--config", str(self.config_path), "-k", TEST_API_KEY,
                "--transcript", str(transcript_path), "--action", "summary",
            )

        self.assertEqual(code, 1)
        self.assertIn("is not valid UTF-8", logs.output[0])
        self.provider.process_transcript.assert_not_called()


@pytest.mark.unit
class TestConfigCommands(CliTestCase):
    def test_set_key_writes_to_explicit_config(self):
        code, _ = self.run_cli("--config", str(self.config_path), "--set-key", "sk-stored-9999")
        self.assertEqual(code, 0)
        text = self.config_path.read_text(encoding="utf-8")
        self.assertIn("sk-stored-9999", text)
        self.assertIn("id: items", text)

    def test_set_key_bootstraps_missing_explicit_config(self):
        target = self.tmp / "fresh" / "config.yml"
        code, _ = self.run_cli("--config", str(target), "--set-key", "sk-stored-9999")
        self.assertEqual(code, 0)
        text = target.read_text(encoding="utf-8")
        self.assertIn("sk-stored-9999", text)
        self.assertIn("openai-meeting-summary", text)

    def test_init_with_yes_resets(self):
        code, _ = self.run_cli("--config", str(self.config_path), "--init", "--yes")
        self.assertEqual(code, 0)
        self.assertIn("openai-meeting-summary", self.config_path.read_text(encoding="utf-8"))

    def test_init_asks_and_cancels(self):
        before = self.config_path.read_text(encoding="utf-8")
        with patch("builtins.input", return_value="n"):
            code, out = self.run_cli("--config", str(self.config_path), "--init")
        self.assertEqual(code, 0)
        self.assertIn("overwrite your existing config", out)
        self.assertEqual(self.config_path.read_text(encoding="utf-8"), before)

    def test_init_asks_and_confirms(self):
        with patch("builtins.input", return_value="yes"):
            code, _ = self.run_cli("--config", str(self.config_path), "--init")
        self.assertEqual(code, 0)
        self.assertIn("openai-meeting-summary", self.config_path.read_text(encoding="utf-8"))

    def test_init_on_eof_cancels(self):
        before = self.config_path.read_text(encoding="utf-8")
        with patch("builtins.input", side_effect=EOFError):
            code, _ = self.run_cli("--config", str(self.config_path), "--init")
        self.assertEqual(code, 0)
        self.assertEqual(self.config_path.read_text(encoding="utf-8"), before)
