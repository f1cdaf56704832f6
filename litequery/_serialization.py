"""JSON encoding used by the structured log formatter."""

from typing import Any, Literal, overload

import msgspec

__all__ = ("decode_json", "encode_json")

# Values msgspec cannot encode natively (exceptions, paths, ...) fall back to ``str``.
_encoder = msgspec.json.Encoder(enc_hook=str)
_decoder = msgspec.json.Decoder()


@overload
def encode_json(data: Any, *, as_bytes: Literal[False] = ...) -> str: ...


@overload
def encode_json(data: Any, *, as_bytes: Literal[True]) -> bytes: ...


def encode_json(data: Any, *, as_bytes: bool = False) -> str | bytes:
    """Encode data to JSON.

    Args:
        data: Data to encode.
        as_bytes: Return bytes instead of a decoded string.

    Returns:
        JSON string or bytes.
    """
    encoded = _encoder.encode(data)
    if as_bytes:
        return encoded
    return encoded.decode("utf-8")


def decode_json(data: str | bytes) -> Any:
    """Decode a JSON document to Python objects."""
    return _decoder.decode(data)
