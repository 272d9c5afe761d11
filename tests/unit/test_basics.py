from pathlib import Path

from grade_report import config
from grade_report.utils import profiler


def test_get_settings_defaults(monkeypatch):
    for name in ("GRADE_INPUT_PATH", "GRADE_OUTPUT_PATH", "LOG_LEVEL", "LOG_JSON", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    settings = config.get_settings()
    assert settings.input_path == Path("students.txt")
    assert settings.output_path == Path("grade_report.txt")
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_get_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("GRADE_INPUT_PATH", str(tmp_path / "in.txt"))
    monkeypatch.setenv("GRADE_OUTPUT_PATH", str(tmp_path / "out.txt"))
    monkeypatch.setenv("LOG_JSON", "true")
    settings = config.get_settings()
    assert settings.input_path == tmp_path / "in.txt"
    assert settings.output_path == tmp_path / "out.txt"
    assert settings.log_json is True


def test_get_settings_is_cached():
    assert config.get_settings() is config.get_settings()


def test_settings_accepts_field_names(tmp_path):
    settings = config.Settings(input_path=tmp_path / "a.txt", log_level="DEBUG")
    assert settings.input_path == tmp_path / "a.txt"
    assert settings.log_level == "DEBUG"


def test_profile_block_measures_time():
    with profiler.profile_block("sum") as stats:
        sum(range(10_000))
    assert stats.label == "sum"
    assert stats.duration_seconds >= 0.0
    assert stats.end_ts >= stats.start_ts
    assert stats.peak_rss_bytes is not None and stats.peak_rss_bytes > 0
