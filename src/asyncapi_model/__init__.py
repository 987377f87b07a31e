"""Read-only object model over parsed AsyncAPI 2.x documents."""
from src.asyncapi_model.base import DetailedAsyncAPI, ModelMeta
from src.asyncapi_model.channel import Channel, Channels
from src.asyncapi_model.collection import Collection
from src.asyncapi_model.common import (
    Binding,
    Bindings,
    Extension,
    Extensions,
    ExternalDocumentation,
    Tag,
    Tags,
)
from src.asyncapi_model.document import AsyncAPIDocument, Info
from src.asyncapi_model.loader import load_document
from src.asyncapi_model.message import Message, Messages
from src.asyncapi_model.operation import Operation, Operations
from src.asyncapi_model.operation_trait import OperationTrait, OperationTraits
from src.asyncapi_model.server import Server, Servers
from src.shared.logging import configure_logging

__all__ = [
    "AsyncAPIDocument",
    "Binding",
    "Bindings",
    "Channel",
    "Channels",
    "Collection",
    "DetailedAsyncAPI",
    "Extension",
    "Extensions",
    "ExternalDocumentation",
    "Info",
    "Message",
    "Messages",
    "ModelMeta",
    "Operation",
    "OperationTrait",
    "OperationTraits",
    "Operations",
    "Server",
    "Servers",
    "Tag",
    "Tags",
    "configure_logging",
    "load_document",
]
