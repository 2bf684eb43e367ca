"""
Download: fetch record and object -> decode -> unwrap -> decrypt.

The private key is supplied per call and is never stored.
"""
import enum
import io
import logging
from dataclasses import dataclass

from evault.errors import ValidationFailure, VaultError, WorkflowFailed

logger = logging.getLogger(__name__)

DOWNLOAD_FAILED = "Failed to download and decrypt file. Please check your private key."
MISSING_KEY = "Please enter your private key"


class DownloadState(enum.Enum):
    IDLE = "idle"
    FETCHING_OBJECT = "fetching_object"
    DECODING = "decoding"
    DECRYPTING = "decrypting"
    MATERIALIZING = "materializing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class DownloadedFile:
    file_name: str
    mime_type: str
    data: bytes

    def as_stream(self):
        return io.BytesIO(self.data)


class DownloadWorkflow:

    def __init__(self, vault):
        self.cipher = vault.cipher
        self.objects = vault.objects
        self.metadata = vault.metadata
        self.auth = vault.auth
        self.state = DownloadState.IDLE

    def run(self, record_id, private_key):
        if not private_key or not private_key.strip():
            raise ValidationFailure(MISSING_KEY)

        try:
            return self._run(record_id, private_key)
        except VaultError as e:
            self.state = DownloadState.FAILED
            # which of key, IV or ciphertext was wrong stays in the log
            logger.exception("Download of record %s failed: %s", record_id, e.message)
            raise WorkflowFailed(DOWNLOAD_FAILED) from e

    def _run(self, record_id, private_key):
        self.state = DownloadState.FETCHING_OBJECT
        user_id = self.auth.get_current_user()
        record = self.metadata.get(record_id, user_id)
        ciphertext = self.objects.fetch(record.storage_path)

        self.state = DownloadState.DECODING
        wrapped = self.cipher.from_text(record.encrypted_key)
        iv = self.cipher.from_text(record.iv)

        self.state = DownloadState.DECRYPTING
        recipient = self.cipher.import_private(private_key)
        aes_key = self.cipher.import_raw(self.cipher.unwrap_key(recipient, wrapped))
        plaintext = self.cipher.decrypt(ciphertext, aes_key, iv)

        self.state = DownloadState.MATERIALIZING
        result = DownloadedFile(
            file_name=record.file_name,
            mime_type=record.mime_type or "application/octet-stream",
            data=plaintext
        )

        self.state = DownloadState.DONE
        logger.info("Decrypted record %s (%d bytes)", record_id, len(plaintext))
        return result
