"""Image <-> Base64 data URL helpers."""

import base64
import math
import mimetypes
import re
from dataclasses import dataclass
from pathlib import Path

from convkit.errors import PreconditionError

_IMG_SRC_RE = re.compile(r"""src=["'](data:image/[^"']+)["']""")
_DATA_URL_RE = re.compile(r"""(data:image/[^;]+;base64,[^"'\s]+)""")
_BARE_BASE64_RE = re.compile(r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?")
_MIME_RE = re.compile(r"^data:([^;]+);")

DEFAULT_MIME_TYPE = "image/png"
SIZE_UNITS = ("Bytes", "KB", "MB", "GB")

NO_IMAGE_MESSAGE = "No valid Base64 image found."
NOT_AN_IMAGE_MESSAGE = "Only image files are supported."


@dataclass
class ImageInfo:
    data_url: str
    mime_type: str
    size: int

    @property
    def extension(self) -> str:
        return self.mime_type.split("/", 1)[-1] or "png"

    @property
    def size_label(self) -> str:
        return format_file_size(self.size)


def format_file_size(size: int) -> str:
    """Human-readable size in base-1024 units, e.g. ``1.5 KB``."""
    if size <= 0:
        return "0 Bytes"
    index = min(int(math.floor(math.log(size) / math.log(1024))), len(SIZE_UNITS) - 1)
    value = round(size / 1024**index, 2)
    return f"{value:g} {SIZE_UNITS[index]}"


def _find_data_url(text: str) -> str:
    match = _IMG_SRC_RE.search(text)
    if match:
        return match.group(1)
    match = _DATA_URL_RE.search(text)
    if match:
        return match.group(1)
    if text and _BARE_BASE64_RE.fullmatch(text):
        return f"data:{DEFAULT_MIME_TYPE};base64,{text}"
    raise PreconditionError(NO_IMAGE_MESSAGE)


def extract_image(text: str) -> ImageInfo:
    """Find a Base64 image in an ``<img>`` tag, a data URL or a bare string."""
    data_url = _find_data_url((text or "").strip())
    mime = _MIME_RE.match(data_url)
    payload = data_url[data_url.find(",") + 1:]
    return ImageInfo(
        data_url=data_url,
        mime_type=mime.group(1) if mime else DEFAULT_MIME_TYPE,
        size=len(payload) * 3 // 4,
    )


def image_to_data_url(data: bytes, mime_type: str) -> str:
    if not mime_type or not mime_type.startswith("image/"):
        raise PreconditionError(NOT_AN_IMAGE_MESSAGE)
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def file_to_image(path: str | Path) -> ImageInfo:
    """Read an image file and return it as a data URL."""
    path = Path(path)
    mime_type, _ = mimetypes.guess_type(path.name)
    data = path.read_bytes()
    return ImageInfo(
        data_url=image_to_data_url(data, mime_type or ""),
        mime_type=mime_type,
        size=len(data),
    )
