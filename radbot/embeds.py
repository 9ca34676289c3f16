"""Structured reply documents (embeds) and the sink that sends them.

Handlers never talk to the transport directly. They build a Document
with build_document() and hand it to a MessageSink, which the transport
layer implements for the originating channel.
"""

from typing import Iterable, List, Optional, Protocol, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EMBED_COLOR = 0x7289DA


class DocumentField(BaseModel):
    """A named block of text inside a Document."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = True


class Document(BaseModel):
    """A titled reply made of named fields."""

    model_config = ConfigDict(frozen=True)

    title: str
    fields: List[DocumentField] = Field(default_factory=list)
    color: int = DEFAULT_EMBED_COLOR

    def field(self, name: str) -> Optional[DocumentField]:
        """Return the first field called ``name``, if any."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


FieldSpec = Union[DocumentField, Tuple[str, str], Tuple[str, str, bool]]


def build_document(
    title: str,
    fields: Iterable[FieldSpec] = (),
    color: Optional[int] = None,
) -> Document:
    """Build a Document from a title and field specs.

    Fields may be given as DocumentField instances or as
    ``(name, value)`` / ``(name, value, inline)`` tuples; tuple fields
    are inline unless stated otherwise.
    """
    built = []
    for spec in fields:
        if isinstance(spec, DocumentField):
            built.append(spec)
        else:
            inline = spec[2] if len(spec) > 2 else True
            built.append(DocumentField(name=spec[0], value=spec[1], inline=inline))
    return Document(
        title=title,
        fields=built,
        color=DEFAULT_EMBED_COLOR if color is None else color,
    )


class MessageSink(Protocol):
    """Destination for replies to one conversation."""

    async def send_document(self, document: Document) -> None:
        ...

    async def send_text(self, text: str) -> None:
        ...
