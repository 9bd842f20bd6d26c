import pytest
from fastapi.testclient import TestClient

from api.dependencies import store
from api.main import app
from run_pipeline import run_pipeline


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(store, "path", tmp_path / "myths.json")
    store.invalidate()
    yield TestClient(app)
    store.invalidate()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["endpoints"]["metadata"] == "/api/metadata"


def test_no_database_yet(client):
    assert client.get("/api/health").json()["status"] == "no-database"
    assert client.get("/api/metadata").status_code == 503
    assert client.get("/api/myths/schwartz-the-first-light").status_code == 503


def test_reads_built_database(client, data_dir):
    run_pipeline(str(data_dir), str(store.path))

    health = client.get("/api/health").json()
    assert health == {"status": "ok", "myths": 8, "database": str(store.path)}

    metadata = client.get("/api/metadata").json()
    assert metadata["stats"]["bySources"]["schwartz"] == 2
    assert metadata["filterOptions"]["sources"] == ["schwartz", "ginzberg-v1", "ginzberg-v2"]

    myth = client.get("/api/myths/schwartz-the-first-light").json()
    assert myth["title"] == "The First Light"
    assert myth["sources"] == ["Midrash Rabbah", "Zohar"]

    assert client.get("/api/myths/unknown").status_code == 404


def test_pipeline_endpoint_rebuilds(client, data_dir):
    response = client.post("/api/pipeline", json={"data_dir": str(data_dir)})
    assert response.status_code == 200
    assert response.json()["status"] == "started"

    # Background tasks run before the test client returns
    assert store.path.exists()
    assert client.get("/api/health").json()["myths"] == 8
