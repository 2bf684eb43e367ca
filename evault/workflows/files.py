import logging

from evault.errors import VaultError, WorkflowFailed

logger = logging.getLogger(__name__)

DELETE_FAILED = "Failed to delete file"
LIST_FAILED = "Failed to load files"
KEYS_FAILED = "Failed to generate keys. Please try again."


def list_files(vault):
    try:
        return vault.metadata.select(vault.auth.get_current_user())
    except VaultError as e:
        logger.exception("Listing files failed")
        raise WorkflowFailed(LIST_FAILED) from e


def delete_file(vault, record_id):
    """Remove the stored object first, then its metadata row."""
    try:
        record = vault.metadata.get(record_id, vault.auth.get_current_user())
        storage_path = record.storage_path
        vault.objects.delete(storage_path)
        vault.metadata.delete(record.id)
    except VaultError as e:
        logger.exception("Deleting record %s failed", record_id)
        raise WorkflowFailed(DELETE_FAILED) from e
    logger.info("Deleted record %s and object %s", record_id, storage_path)


def generate_keys(vault):
    """Fresh RSA key pair as (public_text, private_text). Nothing is stored."""
    try:
        private_key = vault.cipher.generate_key_pair()
        return (
            vault.cipher.export_public(private_key.public_key()),
            vault.cipher.export_private(private_key)
        )
    except (VaultError, ValueError) as e:
        logger.exception("Key generation failed")
        raise WorkflowFailed(KEYS_FAILED) from e
