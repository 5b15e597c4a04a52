"""
File encoder

Turns captured files into inline parts for the generation request.
"""

import base64
import binascii

from exam_coverage.models import InlinePart, UploadedFile

from .exceptions import EncodingError

DATA_URI_SCHEME = "data:"


def _split_data_uri(payload: str):
    """Return (header_mime_type, data) for a data-URI payload."""
    header, sep, data = payload.partition(",")
    if not sep:
        raise EncodingError("Payload has a data-URI header but no ',' separator before the data")
    mime_type = header[len(DATA_URI_SCHEME):].split(";", 1)[0].strip()
    return mime_type, data


def encode(file: UploadedFile) -> InlinePart:
    """
    Convert a captured file into an inline part.

    Strips a transport prefix such as ``data:image/png;base64,`` and checks
    that what remains is non-empty base64.

    Messages carry no ids or decoder text; the decoder error is kept as
    ``__cause__``.

    Raises:
        EncodingError: If the prefix has no separator or the data is not base64
    """
    payload = file.payload.strip()
    header_mime_type = ""

    if payload.startswith(DATA_URI_SCHEME):
        header_mime_type, payload = _split_data_uri(payload)

    data = "".join(payload.split())
    if not data:
        raise EncodingError("File payload is empty")

    try:
        base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError("File payload is not valid base64") from e

    mime_type = file.mime_type or header_mime_type
    if not mime_type:
        raise EncodingError("File has no mime type")

    return InlinePart(mime_type=mime_type, data=data)
