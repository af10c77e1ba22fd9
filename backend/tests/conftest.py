import pytest
from fastapi.testclient import TestClient

from tabular_graph.transform import Table


@pytest.fixture()
def client() -> TestClient:
    from tabular_graph.main import app

    return TestClient(app)


@pytest.fixture()
def ab_table() -> Table:
    return Table.from_records(
        [
            {"A": "a", "B": "x"},
            {"A": "b", "B": "y"},
            {"A": "a", "B": "y"},
        ]
    )


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    # Deterministic settings regardless of the developer's .env
    from tabular_graph import config

    monkeypatch.setattr(config, "STRICT_RULES", False)
    monkeypatch.setattr(config, "MAX_ROWS", 100_000)
    yield
