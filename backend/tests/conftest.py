import pytest
from fastapi.testclient import TestClient

from biztime.core.settings import Settings
from biztime.main import create_app
from biztime.models.company import Company
from biztime.models.invoice import Invoice


# Banco sqlite novo por teste (arquivo em tmp_path); create_all roda no lifespan.
@pytest.fixture
def settings(tmp_path):
    return Settings(
        ENV="test",
        DATABASE_URL=f"sqlite:///{tmp_path / 'biztime_test.db'}",
        DB_CREATE_TABLES=True,
        ACCESS_LOG=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # raise_server_exceptions=False: erros 500 viram resposta JSON, não exceção no teste
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def db_session(client):
    session = client.app.state.db.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_company(db_session):
    c = Company(code="test", name="Test Company", description="Maker of test.")
    db_session.add(c)
    db_session.commit()
    return {"code": c.code, "name": c.name, "description": c.description}


@pytest.fixture
def test_invoice(db_session, test_company):
    inv = Invoice(comp_code=test_company["code"], amt=100, paid=False, paid_date=None)
    db_session.add(inv)
    db_session.commit()
    db_session.refresh(inv)
    return {
        "id": inv.id,
        "comp_code": inv.comp_code,
        "amt": inv.amt,
        "paid": inv.paid,
        "add_date": inv.add_date.isoformat(),
        "paid_date": None,
    }
