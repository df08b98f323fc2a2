"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from setgame_server.config import Config, load_config
from setgame_server.models.event import GameMode


class TestLoadConfig:
    """Tests for load_config()."""

    def test_default(self):
        """Test defaults when no path is given."""
        config = load_config()
        assert config.game.mode == GameMode.NORMAL
        assert config.game.seed is None
        assert not config.rules.chain_requires_set
        assert config.logging.level == "INFO"
        assert not config.replay_log.enabled

    def test_missing_file(self, tmp_path):
        """Test defaults when the file does not exist."""
        assert load_config(tmp_path / "missing.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test defaults for an empty document."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_values(self, tmp_path):
        """Test loading values from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  mode: setchain\n"
            "  seed: 7\n"
            "rules:\n"
            "  chain_requires_set: true\n"
            "replay_log:\n"
            "  enabled: true\n"
            "  output_path: logs/replay.jsonl\n"
        )

        config = load_config(str(path))

        assert config.game.mode == GameMode.SETCHAIN
        assert config.game.seed == 7
        assert config.rules.chain_requires_set
        assert config.replay_log.enabled
        assert config.replay_log.output_path == "logs/replay.jsonl"
        assert config.logging.level == "INFO"

    def test_invalid_mode(self, tmp_path):
        """Test that an unknown mode is a validation error."""
        path = tmp_path / "config.yaml"
        path.write_text("game:\n  mode: speedset\n")
        with pytest.raises(ValidationError):
            load_config(path)
