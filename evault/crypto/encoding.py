import base64
import binascii

from evault.errors import MalformedEncoding


def to_text(data: bytes) -> str:
    return base64.b64encode(bytes(data)).decode("ascii")


def from_text(text) -> bytes:
    if isinstance(text, str):
        try:
            text = text.strip().encode("ascii")
        except UnicodeEncodeError as e:
            raise MalformedEncoding() from e
    elif isinstance(text, (bytes, bytearray)):
        text = bytes(text).strip()
    else:
        raise MalformedEncoding()
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedEncoding() from e
