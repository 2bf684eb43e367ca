from evault.storage.objects import ObjectStore, LocalObjectStore, MemoryObjectStore
from evault.storage.metadata import MetadataStore, SQLAlchemyMetadataStore

__all__ = [
    "ObjectStore",
    "LocalObjectStore",
    "MemoryObjectStore",
    "MetadataStore",
    "SQLAlchemyMetadataStore",
]
