from evault.crypto import encoding, keypair, symmetric


class CipherProvider:
    """
    Every cryptographic primitive the workflows use, behind one object so a
    workflow can be handed a different provider in tests.
    """

    # symmetric
    def generate_key(self):
        return symmetric.generate_key()

    def encrypt(self, plaintext, key):
        return symmetric.encrypt(plaintext, key)

    def decrypt(self, ciphertext, key, iv):
        return symmetric.decrypt(ciphertext, key, iv)

    def export_raw(self, key):
        return symmetric.export_raw(key)

    def import_raw(self, data):
        return symmetric.import_raw(data)

    # asymmetric
    def generate_key_pair(self):
        return keypair.generate_key_pair()

    def export_public(self, key):
        return keypair.export_public(key)

    def export_private(self, key):
        return keypair.export_private(key)

    def import_public(self, text):
        return keypair.import_public(text)

    def import_private(self, text):
        return keypair.import_private(text)

    def wrap_key(self, public_key, raw_key):
        return keypair.wrap_key(public_key, raw_key)

    def unwrap_key(self, private_key, wrapped):
        return keypair.unwrap_key(private_key, wrapped)

    # text
    def to_text(self, data):
        return encoding.to_text(data)

    def from_text(self, text):
        return encoding.from_text(text)


__all__ = ["CipherProvider", "encoding", "keypair", "symmetric"]
