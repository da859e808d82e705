import posixpath
from typing import Any, List, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from src.exceptions import BodyRenderError
from src.models.collection import BodyMode, FormField, RequestDefinition, UrlEncodedField

from ...processors.postman.mime_types import MimeResolver
from ...processors.postman.models import EncodedBody

# Characters encodeURIComponent leaves untouched besides letters and digits
URI_COMPONENT_SAFE = "-_.!~*'()"
FORM_URLENCODED = "application/x-www-form-urlencoded"

FieldModel = TypeVar("FieldModel", bound=BaseModel)


class BodyEncoder:
    """Encodes a request body into body text plus the headers it implies."""

    def __init__(self, boundary: str, mime_resolver: MimeResolver):
        self.boundary = boundary
        self.mime_resolver = mime_resolver

    def encode(self, name: str, request: RequestDefinition) -> EncodedBody:
        """
        Encode the body of ``request``.

        Raises:
            BodyRenderError: If the body payload does not match its mode
        """
        body = request.body
        if body is None:
            return EncodedBody()

        mode = body.body_mode
        if mode == BodyMode.FORMDATA:
            fields = self._parse_fields(name, "formdata", body.formdata, FormField)
            return EncodedBody(
                headers=[
                    f"Host: {request.url.host_name}",
                    f"Content-Type: multipart/form-data; boundary={self.boundary}",
                ],
                body=self.encode_form_data(name, fields),
            )
        if mode == BodyMode.URLENCODED:
            fields = self._parse_fields(name, "urlencoded", body.urlencoded, UrlEncodedField)
            encoded = self.encode_urlencoded(fields)
            return EncodedBody(
                headers=[
                    f"Host: {request.url.host_name}",
                    f"Content-Type: {FORM_URLENCODED}",
                    f"Content-Length: {len(encoded.encode('utf-8'))}",
                ],
                body=f"\n{encoded}",
            )

        if body.raw is not None and not isinstance(body.raw, str):
            raise BodyRenderError(name, f"raw body must be text, got {type(body.raw).__name__}")
        return EncodedBody(body=f"\n{body.raw}" if body.raw else "")

    @staticmethod
    def encode_urlencoded(fields: List[UrlEncodedField]) -> str:
        return "&".join(
            f"{quote(field.key, safe=URI_COMPONENT_SAFE)}={quote(field.value, safe=URI_COMPONENT_SAFE)}"
            for field in fields
        )

    def encode_form_data(self, name: str, fields: List[FormField]) -> str:
        parts: List[str] = []
        for field in fields:
            for disposition in self._form_dispositions(name, field):
                parts.append(f"\n--{self.boundary}\n{disposition}")
        return "".join(parts) + f"\n--{self.boundary}--"

    @staticmethod
    def _parse_fields(name: str, mode: str, payload: Any, model: Type[FieldModel]) -> List[FieldModel]:
        if payload is None:
            raise BodyRenderError(name, f"{mode} mode without fields")
        if not isinstance(payload, list):
            raise BodyRenderError(name, f"{mode} fields must be a list, got {type(payload).__name__}")
        try:
            return [model.model_validate(entry) for entry in payload]
        except ValidationError as e:
            raise BodyRenderError(name, f"invalid {mode} field: {e}") from e

    def _form_dispositions(self, name: str, field: FormField) -> List[str]:
        disposition = f'Content-Disposition: form-data; name="{field.key}"'
        if not field.is_file:
            return [f"{disposition}\n\n{field.value if field.value is not None else ''}"]

        sources = field.sources
        if not sources:
            raise BodyRenderError(name, f"file field '{field.key}' has no source path")

        dispositions = []
        for src in sources:
            file_name = posixpath.basename(src.replace("\\", "/"))
            dispositions.append(
                f'{disposition}; filename="{file_name}"\n'
                f"Content-Type: {self.mime_resolver.resolve(file_name)}\n\n"
                f"< {src}"
            )
        return dispositions
