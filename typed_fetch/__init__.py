"""typed_fetch: a generic, typed resource-fetching client.

The package provides:
    - Typed identifiers and resources with a type-level category name
    - A request builder producing `base/category/id` GET requests
    - Substitutable async transports plus request-transforming decorators
    - A client generic over every resource type
    - Deferred/refresh requests for heterogeneous batches of pending fetches
    - Capability-based membership for collections of file-like values
"""

from __future__ import annotations

# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
from .client import ResourceClient
from .config import ClientConfig
from .decorators import HeaderInjectingTransport, RequestTransformingTransport
from .deferred import DeferredRequest, RefreshRequest, execute_all, refresh_all
from .exceptions import (
    DecodeError,
    HeaderValueError,
    TransportError,
    TypedFetchError,
    UnknownResourceError,
)
from .files import File, SpreadSheet, TextFile, contains
from .identifier import Identifier
from .request import Request, build_request
from .resources import (
    Document,
    DocumentID,
    Resource,
    ResourceSpec,
    User,
    UserID,
    get_resource,
    register_resource,
)
from .result import Failure, Result, Success
from .transport import SHARED_TRANSPORT, AiohttpTransport, Transport

__all__ = [
    "AiohttpTransport",
    "ClientConfig",
    "DecodeError",
    "DeferredRequest",
    "Document",
    "DocumentID",
    "Failure",
    "File",
    "HeaderInjectingTransport",
    "HeaderValueError",
    "Identifier",
    "RefreshRequest",
    "Request",
    "RequestTransformingTransport",
    "Resource",
    "ResourceClient",
    "ResourceSpec",
    "Result",
    "SHARED_TRANSPORT",
    "SpreadSheet",
    "Success",
    "TextFile",
    "Transport",
    "TransportError",
    "TypedFetchError",
    "UnknownResourceError",
    "User",
    "UserID",
    "build_request",
    "contains",
    "execute_all",
    "get_resource",
    "refresh_all",
    "register_resource",
]
