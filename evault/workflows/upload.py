"""
Upload: read -> encrypt -> encode -> store object -> store metadata.

Nothing is rolled back. If the metadata insert fails after the object was
stored, the object stays in the object store with no record pointing at it.
"""
import enum
import logging

from evault.errors import StorageFailure, ValidationFailure, VaultError, WorkflowFailed
from evault.utils import make_storage_name

logger = logging.getLogger(__name__)

UPLOAD_FAILED = "Failed to upload file. Please try again."
MISSING_INPUT = "Please select a file and enter your public key"


class UploadState(enum.Enum):
    IDLE = "idle"
    READING = "reading"
    ENCRYPTING = "encrypting"
    ENCODING = "encoding"
    STORING_OBJECT = "storing_object"
    STORING_METADATA = "storing_metadata"
    DONE = "done"
    FAILED = "failed"


class UploadWorkflow:

    def __init__(self, vault):
        self.cipher = vault.cipher
        self.objects = vault.objects
        self.metadata = vault.metadata
        self.auth = vault.auth
        self.state = UploadState.IDLE
        self.storage_name = None

    def run(self, filename, data, mime_type, public_key):
        """
        Encrypt ``data`` and persist it. Returns the new FileRecord.

        ``data`` is bytes or a readable binary stream. Raises
        ValidationFailure before any work if the file or public key is
        missing, WorkflowFailed for everything else.
        """
        if data is None or not filename or not public_key or not public_key.strip():
            raise ValidationFailure(MISSING_INPUT)

        try:
            return self._run(filename, data, mime_type, public_key.strip())
        except VaultError as e:
            self.state = UploadState.FAILED
            logger.exception("Upload of %s failed: %s", filename, e.message)
            raise WorkflowFailed(UPLOAD_FAILED) from e

    def _run(self, filename, data, mime_type, public_key):
        self.state = UploadState.READING
        try:
            file_bytes = bytes(data if isinstance(data, (bytes, bytearray)) else data.read())
        except OSError as e:
            raise StorageFailure(f"Could not read {filename}") from e

        # 1. Encrypt under a fresh AES key
        self.state = UploadState.ENCRYPTING
        recipient = self.cipher.import_public(public_key)
        aes_key = self.cipher.generate_key()
        encrypted = self.cipher.encrypt(file_bytes, aes_key)

        # 2. Wrap the AES key for the recipient and encode key + IV
        self.state = UploadState.ENCODING
        wrapped = self.cipher.wrap_key(recipient, self.cipher.export_raw(aes_key))
        encoded_key = self.cipher.to_text(wrapped)
        encoded_iv = self.cipher.to_text(encrypted.iv)

        owner_id = self.auth.get_current_user()

        # 3. Ciphertext to object storage
        self.state = UploadState.STORING_OBJECT
        self.storage_name = make_storage_name(filename)
        self.objects.store(self.storage_name, encrypted.ciphertext)

        # 4. Metadata row
        self.state = UploadState.STORING_METADATA
        record = self.metadata.insert(
            file_name=filename,
            storage_path=self.storage_name,
            encrypted_key=encoded_key,
            iv=encoded_iv,
            public_key=public_key,
            original_size=len(file_bytes),
            mime_type=mime_type or "application/octet-stream",
            user_id=owner_id
        )

        self.state = UploadState.DONE
        logger.info("Uploaded %s as %s (%d bytes)", filename, self.storage_name, len(file_bytes))
        return record
