"""
Placeholder 3D assets returned while no real 3D generation service exists.
"""
import json
import struct
import zlib

from ..data_uri import encode_data_uri
from ..schemas import ModelResponse

MODEL_MIME_TYPE = "model/gltf-binary"
TEXTURE_MIME_TYPE = "image/png"


def empty_glb() -> bytes:
    """A binary glTF 2.0 container with an asset header and no geometry."""
    content = json.dumps({"asset": {"version": "2.0", "generator": "film-studio placeholder"}}).encode("utf-8")
    content += b" " * (-len(content) % 4)
    json_chunk = struct.pack("<II", len(content), 0x4E4F534A) + content
    header = struct.pack("<4sII", b"glTF", 2, 12 + len(json_chunk))
    return header + json_chunk


def solid_png(rgb=(128, 128, 128)) -> bytes:
    """A 1x1 RGB PNG of a single color."""
    def chunk(tag: bytes, data: bytes) -> bytes:
        crc = zlib.crc32(tag + data) & 0xFFFFFFFF
        return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", crc)

    header = struct.pack(">IIBBBBB", 1, 1, 8, 2, 0, 0, 0)
    scanline = b"\x00" + bytes(rgb)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", header)
        + chunk(b"IDAT", zlib.compress(scanline))
        + chunk(b"IEND", b"")
    )


def placeholder_model_response() -> ModelResponse:
    return ModelResponse(
        model_data_uri=encode_data_uri(empty_glb(), MODEL_MIME_TYPE),
        texture_data_uri=encode_data_uri(solid_png(), TEXTURE_MIME_TYPE),
    )
