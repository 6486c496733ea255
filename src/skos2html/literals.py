"""Display strings for RDF values.

Graph nodes are first turned into one of three value shapes:

- ``PlainText``: language-neutral text (plain strings, untagged literals),
- ``TaggedLiteral``: text with a language tag,
- ``Uri``: a reference to another resource.

``string_for`` then picks the text to show for a requested language.
"""

import logging
from dataclasses import dataclass

from rdflib import Literal, URIRef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class TaggedLiteral:
    lang: str
    text: str


@dataclass(frozen=True)
class Uri:
    value: str


def same_language(tag: str | None, lang: str | None) -> bool:
    # BCP-47 tags compare case-insensitively.
    if tag is None or lang is None:
        return tag is lang
    return tag.lower() == lang.lower()


def value_for_node(node):
    """Convert an rdflib node (or a python str) to a value shape.

    Returns None for anything else, e.g. blank nodes.
    """
    if isinstance(node, Literal):
        if node.language:
            return TaggedLiteral(lang=node.language, text=str(node))
        return PlainText(str(node))
    if isinstance(node, URIRef):
        return Uri(str(node))
    # rdflib nodes are str subclasses too; only accept real strings here.
    if isinstance(node, str) and not hasattr(node, "n3"):
        return PlainText(node)
    return None


def string_for(value, lang: str | None) -> str | None:
    """Return a human readable representation of value.

    For language-tagged literals the text is only returned if it is in
    ``lang``; pass ``lang=None`` to accept any language. URIs are not
    dereferenced, a placeholder is returned instead.
    """
    shape = value
    if not isinstance(shape, PlainText | TaggedLiteral | Uri):
        shape = value_for_node(value)

    if isinstance(shape, PlainText):
        return shape.text
    if isinstance(shape, TaggedLiteral):
        if lang is None or same_language(shape.lang, lang):
            return shape.text
        return f"[Not available in {lang}]"
    if isinstance(shape, Uri):
        return f"[fetched label for {shape.value}]"

    logger.info("Cannot display value of unknown kind: %r", value)
    return None
