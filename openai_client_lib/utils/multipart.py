"""
Minimal ``multipart/form-data`` encoder used for binary uploads.

The provider endpoints for image edits/variations, audio transcription and
translation, and file upload expect the exact framing below::

    --<boundary>\\r\\n
    Content-Disposition: form-data; name="<field>"[; filename="<name>"]\\r\\n
    [Content-Type: <mime>\\r\\n]
    \\r\\n
    <raw bytes>\\r\\n
    ...
    --<boundary>--\\r\\n
"""

import uuid
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class FormPart:
    name: str
    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None


class MultipartForm:
    """
    Ordered collection of form fields and files.

    Each field name may appear only once.  ``None`` values are skipped, which
    lets callers pass optional parameters straight through.
    """

    def __init__(self):
        self._parts: List[FormPart] = []

    @property
    def parts(self) -> List[FormPart]:
        return list(self._parts)

    def add_field(self, name: str, value: Union[str, int, float, bool, None]):
        if value is None:
            return self
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._append(FormPart(name=name, data=str(value).encode("utf-8")))
        return self

    def add_file(
        self,
        name: str,
        data: Optional[bytes],
        filename: str,
        content_type: str = "application/octet-stream",
    ):
        if data is None:
            return self
        self._append(
            FormPart(
                name=name,
                data=bytes(data),
                filename=filename,
                content_type=content_type,
            )
        )
        return self

    def encode(self, boundary: Optional[str] = None) -> Tuple[bytes, str]:
        """
        Serialise the form.

        Returns
        -------
        Tuple[bytes, str]
            The body and the matching ``Content-Type`` header value.
        """
        boundary = boundary or self._fresh_boundary()
        marker = f"--{boundary}".encode("ascii")
        body = bytearray()
        for part in self._parts:
            body += marker + b"\r\n"
            disposition = f'Content-Disposition: form-data; name="{part.name}"'
            if part.filename is not None:
                disposition += f'; filename="{part.filename}"'
            body += disposition.encode("utf-8") + b"\r\n"
            if part.content_type:
                body += f"Content-Type: {part.content_type}".encode("ascii") + b"\r\n"
            body += b"\r\n"
            body += part.data
            body += b"\r\n"
        body += marker + b"--\r\n"
        return bytes(body), f"multipart/form-data; boundary={boundary}"

    def _fresh_boundary(self) -> str:
        while True:
            boundary = uuid.uuid4().hex
            token = boundary.encode("ascii")
            if not any(token in part.data for part in self._parts):
                return boundary

    def _append(self, part: FormPart) -> None:
        if any(p.name == part.name for p in self._parts):
            raise ValueError(f"Form field '{part.name}' added twice")
        self._parts.append(part)

    def __len__(self) -> int:
        return len(self._parts)
