import pytest

from tabular_graph import config


@pytest.mark.parametrize(
    "value, expected",
    [("debug", "DEBUG"), ("WARNING", "WARNING"), ("loud", "INFO"), ("", "INFO")],
)
def test_log_level_falls_back_to_info(monkeypatch, value, expected):
    monkeypatch.setenv("TABULAR_GRAPH_LOG_LEVEL", value)
    assert config._log_level("TABULAR_GRAPH_LOG_LEVEL") == expected


def test_int_and_bool_settings(monkeypatch):
    monkeypatch.setenv("TABULAR_GRAPH_MAX_ROWS", "abc")
    monkeypatch.setenv("TABULAR_GRAPH_STRICT_RULES", "yes")
    assert config._int("TABULAR_GRAPH_MAX_ROWS", 7) == 7
    assert config._bool("TABULAR_GRAPH_STRICT_RULES") is True
