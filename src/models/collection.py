from enum import Enum
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, field_validator, model_validator


class BodyMode(str, Enum):
    RAW = "raw"
    FORMDATA = "formdata"
    URLENCODED = "urlencoded"


def _as_text(value: Any) -> str:
    """Postman exports occasionally carry null or numeric values where text is expected."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class Header(BaseModel):
    key: str = ""
    value: str = ""

    @field_validator("key", "value", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class QueryParam(BaseModel):
    key: Optional[str] = None
    value: Optional[str] = None


class FormField(BaseModel):
    key: str = ""
    type: str = "text"
    value: Optional[str] = None
    src: Optional[Union[str, List[str]]] = None

    @field_validator("key", "type", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, value: Any) -> Optional[str]:
        return None if value is None else _as_text(value)

    @property
    def is_file(self) -> bool:
        return self.type == "file"

    @property
    def sources(self) -> List[str]:
        if self.src is None:
            return []
        return [self.src] if isinstance(self.src, str) else list(self.src)


class UrlEncodedField(BaseModel):
    key: str = ""
    value: str = ""

    @field_validator("key", "value", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class RequestBody(BaseModel):
    """
    A request body. Only the payload matching ``mode`` is meaningful. Payloads are
    kept as exported and checked by the encoder, so a malformed body fails only
    when its own request is rendered.
    """

    mode: Any = None
    raw: Any = None
    formdata: Any = None
    urlencoded: Any = None

    @property
    def body_mode(self) -> BodyMode:
        """Unknown or missing modes are treated as raw."""
        try:
            return BodyMode(self.mode)
        except (TypeError, ValueError):
            return BodyMode.RAW


class RequestUrl(BaseModel):
    raw: str = ""
    host: List[str] = Field(default_factory=list)
    path: List[str] = Field(default_factory=list)
    query: List[QueryParam] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"raw": data}
        return data

    @field_validator("host", "path", mode="before")
    @classmethod
    def _as_segments(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @property
    def host_name(self) -> str:
        return ".".join(self.host)


class RequestDefinition(BaseModel):
    method: str = "GET"
    header: List[Header] = Field(default_factory=list)
    url: RequestUrl = Field(default_factory=RequestUrl)
    body: Optional[RequestBody] = None

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> str:
        return _as_text(value).upper() or "GET"

    @field_validator("body", mode="before")
    @classmethod
    def _wrap_body(cls, value: Any) -> Any:
        # A body that is not an object is kept as a raw payload for the encoder to judge
        if value is None or isinstance(value, (dict, RequestBody)):
            return value
        return {"raw": value}


class RequestItem(BaseModel):
    name: str
    request: RequestDefinition


def _item_kind(value: Any) -> str:
    """A node is a folder iff it declares a child item sequence."""
    if isinstance(value, dict):
        return "folder" if "item" in value else "request"
    return "folder" if isinstance(value, FolderItem) else "request"


Item = Annotated[
    Union[Annotated["FolderItem", Tag("folder")], Annotated[RequestItem, Tag("request")]],
    Discriminator(_item_kind),
]


class FolderItem(BaseModel):
    name: str
    item: List[Item] = Field(default_factory=list)


FolderItem.model_rebuild()


class CollectionInfo(BaseModel):
    name: str


class CollectionDocument(BaseModel):
    """Root of an exported Postman collection."""

    info: CollectionInfo
    item: List[Item] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.info.name
