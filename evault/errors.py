class VaultError(Exception):
    """Base class for every failure the vault reports to a caller."""

    default_message = "Something went wrong."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationFailure(VaultError):
    # wrong key, wrong IV and corrupted ciphertext all look the same
    default_message = "Decryption failed."


class MalformedEncoding(VaultError):
    default_message = "Value is not valid base64."


class MalformedKey(VaultError):
    default_message = "Key is not a valid key container."


class StorageFailure(VaultError):
    default_message = "Storage operation failed."


class ValidationFailure(VaultError):
    default_message = "Missing required input."


class AuthError(VaultError):
    default_message = "Not signed in."


class WorkflowFailed(VaultError):
    """The single message a workflow shows the user. The cause is chained."""
