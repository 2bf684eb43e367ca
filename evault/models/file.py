from datetime import datetime, timezone

from evault.extensions import db


class FileRecord(db.Model):
    __tablename__ = "files"

    id = db.Column(db.Integer, primary_key=True)
    file_name = db.Column(db.String(260), nullable=False)
    storage_path = db.Column(db.String(320), nullable=False, unique=True)
    # base64 of the AES key wrapped under public_key
    encrypted_key = db.Column(db.Text, nullable=False)
    iv = db.Column(db.String(32), nullable=False)
    public_key = db.Column(db.Text, nullable=False)
    original_size = db.Column(db.Integer, nullable=False)
    mime_type = db.Column(db.String(120))
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    owner = db.relationship("User", back_populates="files")

    def to_dict(self):
        return {
            "id": self.id,
            "file_name": self.file_name,
            "storage_path": self.storage_path,
            "original_size": self.original_size,
            "mime_type": self.mime_type,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<FileRecord {self.file_name}>"
