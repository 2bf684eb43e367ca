import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import SQLAlchemyError

from evault.errors import StorageFailure
from evault.extensions import db
from evault.models.file import FileRecord

logger = logging.getLogger(__name__)


class MetadataStore(ABC):
    """Persistence for FileRecord rows."""

    @abstractmethod
    def insert(self, **fields) -> FileRecord:
        ...

    @abstractmethod
    def select(self, user_id) -> list:
        """Records owned by ``user_id``, newest first."""

    @abstractmethod
    def get(self, record_id, user_id) -> FileRecord:
        """One record, only if ``user_id`` owns it."""

    @abstractmethod
    def delete(self, record_id) -> None:
        ...


class SQLAlchemyMetadataStore(MetadataStore):

    def insert(self, **fields):
        record = FileRecord(**fields)
        try:
            db.session.add(record)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageFailure("Could not save file record") from e
        return record

    def select(self, user_id):
        try:
            return (
                FileRecord.query
                .filter_by(user_id=user_id)
                .order_by(FileRecord.created_at.desc(), FileRecord.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageFailure("Could not load file records") from e

    def get(self, record_id, user_id):
        try:
            record = FileRecord.query.filter_by(id=record_id, user_id=user_id).first()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageFailure("Could not load file record") from e
        if record is None:
            raise StorageFailure(f"File record {record_id} not found")
        return record

    def delete(self, record_id):
        try:
            record = db.session.get(FileRecord, record_id)
            if record is None:
                raise StorageFailure(f"File record {record_id} not found")
            db.session.delete(record)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageFailure("Could not delete file record") from e
