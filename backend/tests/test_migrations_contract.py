from datetime import date
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient

from biztime.core.settings import Settings
from biztime.main import create_app

BACKEND_DIR = Path(__file__).resolve().parents[1]


# Caminho de prod: schema criado pelo alembic, sem create_all no startup.
@pytest.fixture
def migrated_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'biztime_migrated.db'}"
    # env.py lê DATABASE_URL via Settings
    monkeypatch.setenv("BIZTIME_DATABASE_URL", url)

    cfg = Config()
    cfg.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    command.upgrade(cfg, "head")
    return url


@pytest.fixture
def migrated_client(migrated_url):
    settings = Settings(ENV="test", DATABASE_URL=migrated_url, DB_CREATE_TABLES=False, ACCESS_LOG=False)
    with TestClient(create_app(settings), raise_server_exceptions=False) as c:
        yield c


def test_migrated_schema_accepts_company_and_invoice(migrated_client):
    resp = migrated_client.post("/companies", json={"code": "mig", "name": "Migrated Co"})
    assert resp.status_code == 201

    resp = migrated_client.post("/invoices", json={"comp_code": "mig", "amt": 250})
    assert resp.status_code == 201

    inv = resp.json()["invoice"]
    assert inv["paid"] is False
    assert inv["paid_date"] is None
    assert inv["add_date"] == date.today().isoformat()

    assert migrated_client.get("/companies/mig").json()["company"]["invoices"] == [inv["id"]]


def test_migrated_schema_enforces_foreign_key(migrated_client):
    resp = migrated_client.post("/invoices", json={"comp_code": "nope", "amt": 10})
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INTERNAL_ERROR"

    assert migrated_client.get("/invoices").json() == {"invoices": []}
