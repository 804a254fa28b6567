"""Document resource."""

from __future__ import annotations

from dataclasses import dataclass

from ..identifier import Identifier
from .base import Resource, ResourceSpec


class DocumentID(Identifier[str]):
    """String document key."""

    value_type = str


@dataclass(frozen=True)
class Document(Resource[DocumentID], category="document"):
    """A titled document.

    Attributes:
        id: Document key.
        title: Document title.
    """

    ID = DocumentID

    id: DocumentID
    title: str


SPEC = ResourceSpec.of(Document)
