from src.models.collection import (
    BodyMode,
    CollectionDocument,
    CollectionInfo,
    FolderItem,
    FormField,
    Header,
    Item,
    QueryParam,
    RequestBody,
    RequestDefinition,
    RequestItem,
    RequestUrl,
    UrlEncodedField,
)
from src.models.environment import EnvironmentDocument, EnvironmentValue
from src.models.file_spec import FileSpec

__all__ = [
    "BodyMode",
    "CollectionDocument",
    "CollectionInfo",
    "EnvironmentDocument",
    "EnvironmentValue",
    "FileSpec",
    "FolderItem",
    "FormField",
    "Header",
    "Item",
    "QueryParam",
    "RequestBody",
    "RequestDefinition",
    "RequestItem",
    "RequestUrl",
    "UrlEncodedField",
]
