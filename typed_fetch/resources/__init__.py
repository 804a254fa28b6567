"""Fetchable resources.

Resources are typed entities retrievable by identifier from a named category
endpoint. Built-in resources are discovered by `registry`.
"""

from __future__ import annotations

from .base import Resource, ResourceSpec
from .document import Document, DocumentID
from .registry import (
    RESOURCES,
    decode_resource,
    get_resource,
    register_resource,
)
from .user import User, UserID

__all__ = [
    "Document",
    "DocumentID",
    "RESOURCES",
    "Resource",
    "ResourceSpec",
    "User",
    "UserID",
    "decode_resource",
    "get_resource",
    "register_resource",
]
