"""
vCloud XML wire wrappers.

Thin read-only views over the XML documents the vCloud API returns, plus
builders for the request bodies the SDK sends.
"""

from .base import Link, Wrapper, wrap_document
from .constants import MEDIA_TYPE
from .entities import (
    Catalog,
    CatalogItem,
    Disk,
    Error,
    HardDisk,
    Media,
    Org,
    OrgVdcNetwork,
    SessionDocument,
    Task,
    VApp,
    Vdc,
    Vm,
    Vms,
)
from .params import RequestBody

__all__ = [
    "Catalog",
    "CatalogItem",
    "Disk",
    "Error",
    "HardDisk",
    "Link",
    "MEDIA_TYPE",
    "Media",
    "Org",
    "OrgVdcNetwork",
    "RequestBody",
    "SessionDocument",
    "Task",
    "VApp",
    "Vdc",
    "Vm",
    "Vms",
    "Wrapper",
    "wrap_document",
]
