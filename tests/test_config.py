# tests/test_config.py
import os

import pytest

# local imports
from ContextEngine.config import EngineConfig, load_config, log_level_from_env


def test_defaults(clean_env, tmp_path):
    config = load_config(tmp_path / "absent.env")
    assert config == EngineConfig()
    assert config.placeholder == "// ..."
    assert config.instruction_marker == "// TODO: - "


@pytest.mark.parametrize("value, expected", [("1", True), ("true", True), ("YES", True), (" on ", True),
                                             ("0", False), ("false", False), ("", False)])
def test_boolean_flags(clean_env, tmp_path, value, expected):
    clean_env.setenv("CONTEXT_FORCE_MARKERS", value)
    clean_env.setenv("CONTEXT_TARGETED", value)
    config = load_config(tmp_path / "absent.env")
    assert config.force_markers is expected
    assert config.targeted is expected


def test_placeholder_from_env(clean_env, tmp_path):
    clean_env.setenv("CONTEXT_PLACEHOLDER", "/* omitted */")
    assert load_config(tmp_path / "absent.env").placeholder == "/* omitted */"


def test_dotenv_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CONTEXT_TARGETED=true\n", encoding="utf-8")

    config = load_config(env_file)
    assert config.targeted
    assert os.environ["CONTEXT_TARGETED"] == "true"


def test_environment_wins_over_dotenv(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CONTEXT_FORCE_MARKERS=1\n", encoding="utf-8")
    clean_env.setenv("CONTEXT_FORCE_MARKERS", "0")

    assert not load_config(env_file).force_markers


def test_config_is_frozen():
    with pytest.raises(AttributeError):
        EngineConfig().targeted = True


def test_log_level(clean_env):
    assert log_level_from_env() == "WARNING"
    clean_env.setenv("CONTEXT_LOG_LEVEL", "debug")
    assert log_level_from_env() == "DEBUG"
