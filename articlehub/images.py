from __future__ import annotations

import base64
import binascii
import uuid
from pathlib import Path

from articlehub.errors import DecodeError, InvalidFormat

DATA_URI_PREFIX = "data:image/"
BASE64_SEPARATOR = ";base64,"
# Extension is fixed whatever the payload's MIME type says.
IMAGE_EXTENSION = ".jpg"


def resolve_public_base_url(vercel_url: str | None, host: str, port: int) -> str:
    """Origin used to build public upload URLs."""
    if vercel_url:
        return f"https://{vercel_url}"
    return f"http://{host}:{port}"


def decode_data_uri(payload: str) -> bytes:
    if not payload.startswith(DATA_URI_PREFIX):
        raise InvalidFormat("Invalid image data format")

    if BASE64_SEPARATOR not in payload:
        raise DecodeError("Could not extract base64 data")
    # accept the URL-safe alphabet and wrapped lines, reject anything else
    encoded = "".join(payload.split(BASE64_SEPARATOR)[-1].split())
    if not encoded:
        raise DecodeError("Could not extract base64 data")
    encoded = encoded.replace("-", "+").replace("_", "/")
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Could not decode base64 data: {exc}") from exc


def persist_inline_image(payload: str, public_folder: str | Path, base_url: str,
                         upload_subdir: str = "uploads") -> str:
    """
    Decode a `data:image/...;base64,` payload, write it under
    `<public_folder>/<upload_subdir>/` and return its public URL.

    Raises InvalidFormat / DecodeError before anything touches the disk;
    filesystem errors propagate unchanged.
    """
    image_bytes = decode_data_uri(payload)
    image_name = f"{uuid.uuid4()}{IMAGE_EXTENSION}"

    upload_dir = Path(public_folder) / upload_subdir
    upload_dir.mkdir(parents=True, exist_ok=True)
    (upload_dir / image_name).write_bytes(image_bytes)

    return f"{base_url}/public/{upload_subdir}/{image_name}"
