import io
import itertools

import pytest

from imt_fitness import create_app
from imt_fitness.extensions import db as _db
from imt_fitness.models import Role
from imt_fitness.services.users import create_user, issue_token

PASSWORD = "secret123"


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path / "uploads")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return _db.session


@pytest.fixture
def make_user(session):
    counter = itertools.count(1)

    def _make(role=Role.CLIENT, coach=None, name=None, **kwargs):
        n = next(counter)
        return create_user(
            session,
            name=name or f"{role.value.title()} {n}",
            phone=f"08120000{n:04d}",
            password=PASSWORD,
            role=role,
            coach_id=coach.id if coach else None,
            **kwargs
        )
    return _make


@pytest.fixture
def admin(make_user):
    return make_user(Role.ADMIN, name="Admin")


@pytest.fixture
def coach(make_user):
    return make_user(Role.COACH, name="Coach Budi")


@pytest.fixture
def client_user(make_user, coach):
    return make_user(Role.CLIENT, coach=coach, name="Siti")


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"Authorization": f"Bearer {issue_token(user)}"}
    return _headers


@pytest.fixture
def photo():
    def _photo(filename="proof.png", content_type="image/png", payload=b"\x89PNG\r\n\x1a\nfake-image"):
        return (io.BytesIO(payload), filename, content_type)
    return _photo
