from typing import List

from src.exceptions import BodyRenderError
from src.models.collection import Header, RequestDefinition

from ...processors.postman.body_encoder import BodyEncoder
from ...processors.postman.models import EncodedBody
from ...utils.logger import Logger

REQUEST_SEPARATOR = "###"


class RequestRenderer:
    """Renders one request definition into REST Client ``.http`` text."""

    def __init__(self, body_encoder: BodyEncoder):
        self.body_encoder = body_encoder
        self.logger = Logger.get_logger(__name__)

    def render(self, name: str, request: RequestDefinition) -> str:
        request_line = (
            f"{REQUEST_SEPARATOR}\n// {name.upper()}\n{request.method} {request.url.raw} HTTP/1.1"
        )
        header = self.render_headers(request.header)
        body = ""

        if request.body is not None:
            encoded = self._encode_body(name, request)
            if header:
                header += "\n"
            header += "\n".join(encoded.headers)
            body = encoded.body

        return "\n".join([request_line, header, body]) + f"\n{REQUEST_SEPARATOR}\n"

    @staticmethod
    def render_headers(headers: List[Header]) -> str:
        """Join headers as ``Key: Value`` lines, dropping those with an empty key."""
        return "\n".join(f"{header.key}: {header.value}" for header in headers if header.key)

    def _encode_body(self, name: str, request: RequestDefinition) -> EncodedBody:
        try:
            return self.body_encoder.encode(name, request)
        except (BodyRenderError, TypeError, ValueError) as e:
            self.logger.error(f"❌ Failed parsing {name}. Empty request body: {e}")
            return EncodedBody()
