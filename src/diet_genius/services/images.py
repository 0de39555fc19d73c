"""Helpers for turning uploaded images into model and preview payloads."""

import base64

from diet_genius.domain.analysis import ImagePayload

GENERIC_MIME_TYPES = {"", "application/octet-stream"}


def to_data_url(image: ImagePayload) -> str:
    """Convert an image payload to a base64 data URL."""
    encoded = base64.b64encode(image.data).decode("utf-8")
    return f"data:{image.mime_type};base64,{encoded}"


def to_image_payload(data: bytes, declared_mime_type: str | None) -> ImagePayload:
    """Pair image bytes with a media type, sniffing it when none was declared."""
    mime_type = (declared_mime_type or "").split(";")[0].strip().lower()
    if mime_type in GENERIC_MIME_TYPES:
        mime_type = detect_mime_type(data)
    return ImagePayload(data=data, mime_type=mime_type)


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
