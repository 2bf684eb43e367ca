from types import SimpleNamespace

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from evault import create_app
from evault.auth import AuthProvider
from evault.crypto import CipherProvider, keypair
from evault.errors import AuthError
from evault.extensions import bcrypt, db
from evault.models import User
from evault.services import Vault
from evault.storage import MemoryObjectStore, SQLAlchemyMetadataStore

PASSWORD = "correct horse"


class FakeAuth(AuthProvider):
    """Always signed in as one user."""

    def __init__(self, user_id=None):
        self.user_id = user_id

    def sign_in(self, email, password):
        return self.user_id

    def sign_up(self, email, password):
        return self.user_id

    def get_current_user(self):
        if self.user_id is None:
            raise AuthError()
        return self.user_id

    def sign_out(self):
        self.user_id = None


@pytest.fixture(scope="session")
def key_pair():
    private_key = keypair.generate_key_pair()
    return keypair.export_public(private_key), keypair.export_private(private_key)


@pytest.fixture(scope="session")
def other_key_pair():
    private_key = keypair.generate_key_pair()
    return keypair.export_public(private_key), keypair.export_private(private_key)


@pytest.fixture(scope="session")
def small_public_key():
    # 512-bit modulus: parses as RSA but is too short for OAEP-SHA256
    public_key = rsa.RSAPublicNumbers(65537, (1 << 512) - 1).public_key()
    return keypair.export_public(public_key)


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "WTF_CSRF_ENABLED": False,
        "OBJECT_STORE": "memory",
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
        "BCRYPT_LOG_ROUNDS": 4,
    })
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(email="alice@example.com"):
    user = User(email=email, password=bcrypt.generate_password_hash(PASSWORD).decode("utf-8"))
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def user(app):
    with app.app_context():
        created = make_user()
        return SimpleNamespace(id=created.id, email=created.email)


@pytest.fixture
def vault(ctx, user):
    return Vault(
        cipher=CipherProvider(),
        objects=MemoryObjectStore(),
        metadata=SQLAlchemyMetadataStore(),
        auth=FakeAuth(user.id)
    )


@pytest.fixture
def logged_in(client, user):
    resp = client.post("/login", data={"email": user.email, "password": PASSWORD})
    assert resp.status_code == 302
    return client
