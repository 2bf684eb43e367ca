from flask import current_app

from evault.auth import FlaskLoginAuthProvider
from evault.crypto import CipherProvider
from evault.storage import LocalObjectStore, MemoryObjectStore, SQLAlchemyMetadataStore


class Vault:
    """The dependencies every workflow is built from."""

    def __init__(self, cipher, objects, metadata, auth):
        self.cipher = cipher
        self.objects = objects
        self.metadata = metadata
        self.auth = auth


def make_object_store(app):
    kind = app.config["OBJECT_STORE"]
    if kind == "local":
        return LocalObjectStore(app.config["UPLOAD_FOLDER"])
    if kind == "memory":
        return MemoryObjectStore()
    raise ValueError(f"Unknown OBJECT_STORE: {kind!r}")


def init_app(app, vault=None):
    if vault is None:
        vault = Vault(
            cipher=CipherProvider(),
            objects=make_object_store(app),
            metadata=SQLAlchemyMetadataStore(),
            auth=FlaskLoginAuthProvider()
        )
    app.extensions["vault"] = vault
    return vault


def get_vault() -> Vault:
    return current_app.extensions["vault"]
