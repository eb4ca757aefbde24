"""Tests for video_agent_skills.config — config file parsing and API key resolution."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

from video_agent_skills.config import (
    default_config_env_path,
    load_api_key,
    load_env_file,
    merge_environment,
    resolve_api_key,
)
from video_agent_skills.errors import ConfigFileError, MissingAPIKeyError

ENV_FILE = """\
# video-agent-skills settings

export GEMINI_API_KEY=from-file
DOUBLE="hello world"
SINGLE='quoted value'
PLAIN=value
NOEQUALS
"""


@pytest.fixture()
def env_file(tmp_path):
    path = tmp_path / ".env"
    path.write_text(ENV_FILE)
    return path


class TestDefaultConfigPath:
    def test_under_home_config(self, tmp_path):
        with patch("video_agent_skills.config.Path.home", return_value=tmp_path):
            assert default_config_env_path() == tmp_path / ".config" / "video-agent-skills" / ".env"

    def test_no_home(self):
        with patch("video_agent_skills.config.Path.home", side_effect=RuntimeError("no home")):
            assert default_config_env_path() is None


class TestLoadEnvFile:
    def test_parses_values(self, env_file):
        values = load_env_file(env_file)
        assert values["GEMINI_API_KEY"] == "from-file"
        assert values["DOUBLE"] == "hello world"
        assert values["SINGLE"] == "quoted value"
        assert values["PLAIN"] == "value"

    def test_skips_comments_blanks_and_bare_words(self, env_file):
        values = load_env_file(env_file)
        assert set(values) == {"GEMINI_API_KEY", "DOUBLE", "SINGLE", "PLAIN"}

    def test_no_interpolation(self, tmp_path):
        path = tmp_path / ".env"
        path.write_text("A=1\nB=${A}-x\n")
        assert load_env_file(path)["B"] == "${A}-x"

    def test_missing_file_is_empty(self, tmp_path):
        assert load_env_file(tmp_path / "nope.env") == {}

    def test_none_path_is_empty(self):
        assert load_env_file(None) == {}

    def test_directory_raises(self, tmp_path):
        with pytest.raises(ConfigFileError, match="directory"):
            load_env_file(tmp_path)

    def test_unreadable_file_raises(self, env_file):
        with patch(
            "video_agent_skills.config.dotenv_values",
            side_effect=PermissionError("permission denied"),
        ):
            with pytest.raises(ConfigFileError, match="cannot read"):
                load_env_file(env_file)


class TestMergeEnvironment:
    def test_environment_wins(self):
        merged = merge_environment(
            {"GEMINI_API_KEY": "file", "OTHER": "x"},
            {"GEMINI_API_KEY": "env"},
        )
        assert merged["GEMINI_API_KEY"] == "env"
        assert merged["OTHER"] == "x"

    def test_empty_variable_is_filled(self):
        merged = merge_environment({"GOOGLE_API_KEY": "file"}, {"GOOGLE_API_KEY": ""})
        assert merged["GOOGLE_API_KEY"] == "file"

    def test_does_not_touch_os_environ(self):
        with patch.dict(os.environ, {}, clear=True):
            merged = merge_environment({"VIDEO_AGENT_TEST_VAR": "1"})
            assert merged["VIDEO_AGENT_TEST_VAR"] == "1"
            assert "VIDEO_AGENT_TEST_VAR" not in os.environ

    def test_inputs_are_not_mutated(self):
        environ = {"A": "1"}
        merge_environment({"B": "2"}, environ)
        assert environ == {"A": "1"}


class TestResolveApiKey:
    def test_flag_wins(self):
        env = {"GEMINI_API_KEY": "gemini", "GOOGLE_API_KEY": "google"}
        assert resolve_api_key("  flag-key  ", env) == "flag-key"

    def test_gemini_env(self):
        env = {"GEMINI_API_KEY": "gemini", "GOOGLE_API_KEY": "google"}
        assert resolve_api_key(None, env) == "gemini"

    def test_google_env(self):
        assert resolve_api_key(None, {"GOOGLE_API_KEY": " google "}) == "google"

    def test_blank_flag_falls_through(self):
        assert resolve_api_key("   ", {"GEMINI_API_KEY": "gemini"}) == "gemini"

    def test_blank_gemini_falls_through(self):
        env = {"GEMINI_API_KEY": "  ", "GOOGLE_API_KEY": "google"}
        assert resolve_api_key(None, env) == "google"

    def test_missing(self):
        with pytest.raises(MissingAPIKeyError) as exc:
            resolve_api_key(None, {})
        assert "GEMINI_API_KEY" in str(exc.value)
        assert "GOOGLE_API_KEY" in str(exc.value)


class TestLoadApiKey:
    def test_key_from_config_file(self, env_file):
        assert load_api_key(None, env_file, environ={}) == "from-file"

    def test_environment_beats_config_file(self, env_file):
        assert load_api_key(None, env_file, environ={"GEMINI_API_KEY": "env"}) == "env"

    def test_flag_beats_everything(self, env_file):
        assert load_api_key("flag", env_file, environ={"GEMINI_API_KEY": "env"}) == "flag"

    def test_config_file_fills_second_variable(self, tmp_path):
        path = tmp_path / ".env"
        path.write_text("GOOGLE_API_KEY='google-from-file'\n")
        assert load_api_key(None, path, environ={}) == "google-from-file"

    def test_directory_config_warns_and_continues(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="video_agent_skills.config"):
            key = load_api_key(None, tmp_path, environ={"GOOGLE_API_KEY": "google"})
        assert key == "google"
        assert "directory" in caplog.text

    def test_missing_config_is_silent(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="video_agent_skills.config"):
            key = load_api_key(None, tmp_path / "missing.env", environ={"GEMINI_API_KEY": "g"})
        assert key == "g"
        assert caplog.records == []

    def test_nothing_set(self, tmp_path):
        with pytest.raises(MissingAPIKeyError, match="GEMINI_API_KEY or GOOGLE_API_KEY"):
            load_api_key(None, tmp_path / "missing.env", environ={})

    def test_process_environment_untouched(self, env_file):
        with patch.dict(os.environ, {}, clear=True):
            assert load_api_key(None, env_file) == "from-file"
            assert "GEMINI_API_KEY" not in os.environ
            assert "PLAIN" not in os.environ


class TestConfigFileEdgeCases:
    def test_invalid_utf8_raises_config_error(self, tmp_path):
        path = tmp_path / ".env"
        path.write_bytes(b"GEMINI_API_KEY=\xff\xfe bad\n")
        with pytest.raises(ConfigFileError, match="cannot read"):
            load_env_file(path)

    def test_invalid_utf8_warns_and_uses_environment(self, tmp_path, caplog):
        path = tmp_path / ".env"
        path.write_bytes(b"GEMINI_API_KEY=\xff\xfe bad\n")
        with caplog.at_level(logging.WARNING, logger="video_agent_skills.config"):
            key = load_api_key(None, path, environ={"GOOGLE_API_KEY": "g"})
        assert key == "g"
        assert "cannot read" in caplog.text

    def test_whitespace_inside_quotes_is_kept(self, tmp_path):
        path = tmp_path / ".env"
        path.write_text('A=" x "\n')
        assert load_env_file(path)["A"] == " x "
