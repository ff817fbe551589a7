"""Syntactic origin of an extracted link."""

from enum import Enum


class LinkKind(str, Enum):
    LINK = "link"
    IMAGE = "image"
    HTML = "html"
