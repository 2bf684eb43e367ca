"""
RSA-OAEP key pairs.

Keys travel as text: base64 of DER SubjectPublicKeyInfo for the public half,
base64 of DER PKCS#8 for the private half. PEM is accepted on import too.
"""
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from evault.crypto.encoding import from_text, to_text
from evault.errors import AuthenticationFailure, MalformedEncoding, MalformedKey

MODULUS_BITS = 2048
PUBLIC_EXPONENT = 65537


def _oaep():
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None
    )


def generate_key_pair() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(
        public_exponent=PUBLIC_EXPONENT,
        key_size=MODULUS_BITS
    )


def export_public(key) -> str:
    if isinstance(key, rsa.RSAPrivateKey):
        key = key.public_key()
    der = key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )
    return to_text(der)


def export_private(key: rsa.RSAPrivateKey) -> str:
    der = key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )
    return to_text(der)


def _is_pem(text: str) -> bool:
    return text.lstrip().startswith("-----BEGIN")


def import_public(text: str) -> rsa.RSAPublicKey:
    if not text or not text.strip():
        raise MalformedKey("Public key is empty.")
    try:
        if _is_pem(text):
            key = serialization.load_pem_public_key(text.strip().encode())
        else:
            key = serialization.load_der_public_key(from_text(text))
    except (MalformedEncoding, UnsupportedAlgorithm, ValueError, TypeError) as e:
        raise MalformedKey("Public key could not be read.") from e
    if not isinstance(key, rsa.RSAPublicKey):
        raise MalformedKey("Public key is not an RSA key.")
    return key


def import_private(text: str) -> rsa.RSAPrivateKey:
    if not text or not text.strip():
        raise MalformedKey("Private key is empty.")
    try:
        if _is_pem(text):
            key = serialization.load_pem_private_key(text.strip().encode(), password=None)
        else:
            key = serialization.load_der_private_key(from_text(text), password=None)
    except (MalformedEncoding, UnsupportedAlgorithm, ValueError, TypeError) as e:
        raise MalformedKey("Private key could not be read.") from e
    if not isinstance(key, rsa.RSAPrivateKey):
        raise MalformedKey("Private key is not an RSA key.")
    return key


def wrap_key(public_key: rsa.RSAPublicKey, raw_key: bytes) -> bytes:
    """Encrypt a raw symmetric key for the holder of ``public_key``."""
    try:
        return public_key.encrypt(raw_key, _oaep())
    except ValueError as e:
        # modulus too small for OAEP-SHA256 padding
        raise MalformedKey("Public key cannot wrap a file key.") from e


def unwrap_key(private_key: rsa.RSAPrivateKey, wrapped: bytes) -> bytes:
    """
    Recover a raw symmetric key wrapped by :func:`wrap_key`.

    A key pair that does not match, or a damaged wrapped key, both raise
    AuthenticationFailure.
    """
    try:
        return private_key.decrypt(wrapped, _oaep())
    except ValueError as e:
        raise AuthenticationFailure() from e
