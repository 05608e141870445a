"""Decoding of data-URI wrapped payloads returned by relay services"""

import base64
import binascii
from urllib.parse import unquote

from loguru import logger

DATA_URI_PREFIX = "data:"
BASE64_MARKER = ";base64"


def decode_payload(raw: str | None) -> str:
    """Unwrap a relay payload back into raw text.

    Plain text is returned unchanged. A ``data:<metadata>,<payload>`` string
    is base64-decoded when the metadata declares ``;base64`` and
    percent-decoded otherwise. A prefix without a separator is treated as
    plain text. Missing base64 padding is restored before decoding.

    Never raises: undecodable payloads come back unchanged so downstream
    parsing fails on its own terms.

    Args:
        raw: Payload as returned by the relay (may be None)

    Returns:
        Decoded text, or "" for an empty payload
    """
    if not raw:
        return ""
    if not raw.startswith(DATA_URI_PREFIX):
        return raw

    metadata, sep, payload = raw.partition(",")
    if not sep:
        return raw

    if BASE64_MARKER in metadata:
        try:
            padded = payload + "=" * (-len(payload) % 4)
            return base64.b64decode(padded).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            logger.debug(f"Could not base64-decode relay payload: {e}")
            return raw

    return unquote(payload)
