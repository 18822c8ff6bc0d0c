from pathlib import Path

import pytest

from statecomply.config import (
    ENV_FORMATS,
    ENV_LOG_LEVEL,
    ENV_OUTPUT_DIR,
    ReportConfig,
)
from statecomply.constants import US_STATES
from statecomply.core.core_types import EntityType


@pytest.fixture
def clean_env(monkeypatch):
    """Unset config variables and make sure values loaded from .env are undone."""
    for name in (ENV_OUTPUT_DIR, ENV_FORMATS, ENV_LOG_LEVEL):
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults():
    config = ReportConfig()
    assert config.output_dir == Path("output")
    assert config.states == US_STATES
    assert config.entity_types == tuple(EntityType)
    assert config.formats == ("csv",)
    assert config.numeric_log_level == 30


def test_normalises_inputs():
    config = ReportConfig(
        output_dir="reports",
        entity_types=["llc", "Corporation"],
        formats=[" JSON ", "csv"],
        log_level="debug",
    )
    assert config.output_dir == Path("reports")
    assert config.entity_types == (EntityType.LLC, EntityType.CORPORATION)
    assert config.formats == ("json", "csv")
    assert config.log_level == "DEBUG"


def test_rejects_unknown_format():
    with pytest.raises(ValueError, match="xlsx"):
        ReportConfig(formats=("xlsx",))


def test_rejects_unknown_log_level():
    with pytest.raises(ValueError):
        ReportConfig(log_level="LOUD")


def test_from_env_reads_variables(clean_env, tmp_path):
    clean_env.setenv(ENV_OUTPUT_DIR, str(tmp_path / "exports"))
    clean_env.setenv(ENV_FORMATS, "csv, json")
    clean_env.setenv(ENV_LOG_LEVEL, "info")
    config = ReportConfig.from_env(dotenv_path=tmp_path / "missing.env")
    assert config.output_dir == tmp_path / "exports"
    assert config.formats == ("csv", "json")
    assert config.log_level == "INFO"


def test_from_env_loads_dotenv_without_overriding(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(f"{ENV_FORMATS}=json\n{ENV_LOG_LEVEL}=ERROR\n")
    clean_env.setenv(ENV_LOG_LEVEL, "DEBUG")
    config = ReportConfig.from_env(dotenv_path=env_file)
    assert config.formats == ("json",)
    assert config.log_level == "DEBUG"


def test_overrides_win_and_none_is_ignored(clean_env, tmp_path):
    clean_env.setenv(ENV_FORMATS, "json")
    config = ReportConfig.from_env(
        dotenv_path=tmp_path / "missing.env",
        output_dir=tmp_path,
        formats=None,
    )
    assert config.output_dir == tmp_path
    assert config.formats == ("json",)


def test_from_env_finds_dotenv_in_working_directory(clean_env, tmp_path):
    (tmp_path / ".env").write_text(f"{ENV_LOG_LEVEL}=DEBUG\n")
    clean_env.chdir(tmp_path)
    config = ReportConfig.from_env()
    assert config.log_level == "DEBUG"
    assert config.numeric_log_level == 10
