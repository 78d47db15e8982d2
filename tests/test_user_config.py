"""
Tests for layered configuration (defaults, global, local).
"""

import json

import pytest

from inscribe.exceptions import ConfigurationError
from inscribe.mutation import MUTATION_DEFAULTS, get_mutation_config
from inscribe.paths import get_paths
from inscribe.user_config import DEFAULT_CONFIG, UserConfig


def write_config(directory, data):
    config_dir = directory / ".inscribe"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.json").write_text(json.dumps(data))


class TestUserConfig:
    """Hierarchical merge and dot-key access."""

    def test_defaults(self, tmp_path):
        config = UserConfig(tmp_path / "project", home=tmp_path / "home")
        assert config.get("backup.suffix") == ".bak"
        assert config.get("write.line_ending") == "preserve"
        assert config.get("batch.stop_on_error") is False

    def test_missing_key_returns_default(self, tmp_path):
        config = UserConfig(tmp_path, home=tmp_path)
        assert config.get("nope.nothing", 42) == 42

    def test_local_overrides_global(self, tmp_path):
        home = tmp_path / "home"
        project = tmp_path / "project"
        write_config(home, {"backup": {"suffix": ".global"}, "batch": {"stop_on_error": True}})
        write_config(project, {"backup": {"suffix": ".local"}})

        config = UserConfig(project, home=home)

        assert config.get("backup.suffix") == ".local"
        assert config.get("batch.stop_on_error") is True
        assert config.get("write.encoding") == "utf-8"

    def test_malformed_file_ignored(self, tmp_path):
        (tmp_path / ".inscribe").mkdir()
        (tmp_path / ".inscribe" / "config.json").write_text("{not json")
        config = UserConfig(tmp_path, home=tmp_path / "home")
        assert config.get("backup.suffix") == ".bak"

    def test_defaults_not_mutated(self, tmp_path):
        write_config(tmp_path, {"write": {"atomic": False}})
        UserConfig(tmp_path, home=tmp_path / "home")
        assert DEFAULT_CONFIG["write"]["atomic"] is True

    def test_reload_picks_up_changes(self, tmp_path):
        config = UserConfig(tmp_path, home=tmp_path / "home")
        write_config(tmp_path, {"preview": {"format": "diff"}})
        config.reload()
        assert config.get("preview.format") == "diff"

    def test_shared_paths_follow_cwd_and_home(self, tmp_path, isolated_config):
        paths = get_paths()
        assert paths is get_paths()
        assert paths.local_config.resolve() == (isolated_config / ".inscribe" / "config.json").resolve()
        assert paths.global_config == tmp_path / "home" / ".inscribe" / "config.json"


class TestMutationConfig:
    """Flattened settings for the editor and driver."""

    def test_defaults_match(self, tmp_path):
        config = get_mutation_config(UserConfig(tmp_path, home=tmp_path / "home"))
        assert config == MUTATION_DEFAULTS

    def test_reads_cwd_and_home_by_default(self, isolated_config):
        write_config(isolated_config, {"write": {"line_ending": "crlf"}})
        assert get_mutation_config()["line_ending"] == "crlf"

    @pytest.mark.parametrize("data,message", [
        ({"write": {"line_ending": "cr"}}, "line ending"),
        ({"preview": {"format": "html"}}, "preview format"),
        ({"backup": {"suffix": ""}}, "suffix"),
    ])
    def test_invalid_values_rejected(self, tmp_path, data, message):
        write_config(tmp_path, data)
        with pytest.raises(ConfigurationError, match=message):
            get_mutation_config(UserConfig(tmp_path, home=tmp_path / "home"))
