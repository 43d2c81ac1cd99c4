"""
Helpers for embedded data references (``data:<mime>;base64,<payload>``).
"""
import asyncio
import base64
import binascii
import logging
import re
from typing import Any, Tuple

from .errors import ReadError

logger = logging.getLogger(__name__)

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>[A-Za-z0-9+/=]*)$")


def encode_data_uri(data: bytes, mime_type: str) -> str:
    """Encode raw bytes as a base64 data URI."""
    if not mime_type:
        raise ValueError("A MIME type is required to build a data URI")
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def decode_data_uri(uri: str) -> Tuple[str, bytes]:
    """Split a base64 data URI into its MIME type and decoded bytes.

    Raises:
        ValueError: If the string is not a base64 data URI
    """
    match = DATA_URI_PATTERN.match(uri or "")
    if not match:
        raise ValueError("Not a base64 data URI")
    try:
        data = base64.b64decode(match.group("payload"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {str(e)}") from e
    return match.group("mime"), data


async def file_to_data_uri(uploaded_file: Any) -> str:
    """Read an uploaded file and encode it as a data URI.

    The read runs in a worker thread so the event loop is not blocked.

    Args:
        uploaded_file: A file-like upload exposing ``getvalue()`` and ``type``
            (for example Streamlit's ``UploadedFile``)

    Returns:
        The file content as ``data:<type>;base64,<payload>``

    Raises:
        ReadError: If reading or encoding the file fails
    """
    name = getattr(uploaded_file, "name", "upload")
    try:
        data = await asyncio.to_thread(uploaded_file.getvalue)
        return encode_data_uri(data, getattr(uploaded_file, "type", None))
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read uploaded file {name}: {str(e)}")
        raise ReadError(f"Could not read {name}: {str(e)}") from e
