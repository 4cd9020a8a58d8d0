"""Codecs module -- Base64, images, hashes, timestamps."""

from convkit.codecs.base64_codec import decode_text, encode_text
from convkit.codecs.hashing import HashResult, generate_hashes
from convkit.codecs.images import ImageInfo, extract_image, file_to_image
from convkit.codecs.timestamps import date_to_timestamp, timestamp_to_date

__all__ = [
    "decode_text",
    "encode_text",
    "HashResult",
    "generate_hashes",
    "ImageInfo",
    "extract_image",
    "file_to_image",
    "date_to_timestamp",
    "timestamp_to_date",
]
