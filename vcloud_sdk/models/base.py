"""
Base wrapper around vCloud XML documents.

Every response body from the API is an XML document whose root tag names the
entity (Task, VApp, Vm, ...). wrap_document() parses it and returns an
instance of the wrapper class registered for that tag.
"""

from lxml import etree
from typing import Dict, List, Optional, Type

from .constants import VCLOUD_NS

_WRAPPERS: Dict[str, Type["Wrapper"]] = {}


def vcloud_tag(name: str) -> str:
    return f"{{{VCLOUD_NS}}}{name}"


def local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def register(tag_name: str):
    """Class decorator registering a wrapper for a root tag."""
    def decorator(cls):
        _WRAPPERS[tag_name] = cls
        cls.TAG = tag_name
        return cls
    return decorator


def wrap_element(element: etree._Element) -> "Wrapper":
    cls = _WRAPPERS.get(local_name(element.tag), Wrapper)
    return cls(element)


def wrap_document(text) -> Optional["Wrapper"]:
    """
    Parse an XML document and wrap its root element.

    Args:
        text: XML as str or bytes; empty bodies return None

    Returns:
        Wrapper subclass instance for the root tag, or None
    """
    if text is None:
        return None
    if isinstance(text, str):
        # lxml refuses str input that carries an encoding declaration
        text = text.encode("utf-8")
    if not text.strip():
        return None
    return wrap_element(etree.fromstring(text))


class Link:
    """A <Link> or reference element: rel/type/name/href."""

    def __init__(self, element: etree._Element):
        self.element = element

    @property
    def href(self) -> Optional[str]:
        return self.element.get("href")

    @property
    def rel(self) -> Optional[str]:
        return self.element.get("rel")

    @property
    def type(self) -> Optional[str]:
        return self.element.get("type")

    @property
    def name(self) -> Optional[str]:
        return self.element.get("name")

    def __repr__(self):
        return f"<Link rel={self.rel!r} type={self.type!r} href={self.href!r}>"


class Wrapper:
    TAG = None

    def __init__(self, element: etree._Element):
        self.element = element

    def __getitem__(self, attribute: str):
        return self.element.get(attribute)

    @property
    def name(self) -> Optional[str]:
        return self.element.get("name")

    @property
    def href(self) -> Optional[str]:
        return self.element.get("href")

    @property
    def type(self) -> Optional[str]:
        return self.element.get("type")

    @property
    def id(self) -> Optional[str]:
        return self.element.get("id")

    @property
    def status(self) -> Optional[str]:
        return self.element.get("status")

    @property
    def links(self) -> List[Link]:
        return [Link(e) for e in self.element.findall(vcloud_tag("Link"))]

    def find_link(self, rel: str, type: Optional[str] = None) -> Optional[Link]:
        for link in self.links:
            if link.rel == rel and (type is None or link.type == type):
                return link
        return None

    def find_links(self, rel: str, type: Optional[str] = None) -> List[Link]:
        return [link for link in self.links
                if link.rel == rel and (type is None or link.type == type)]

    def child_text(self, name: str) -> Optional[str]:
        child = self.element.find(vcloud_tag(name))
        return child.text if child is not None else None

    def __repr__(self):
        return f"<{type(self).__name__} name={self.name!r} href={self.href!r}>"
