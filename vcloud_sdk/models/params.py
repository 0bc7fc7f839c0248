"""
Request bodies for mutating vCloud calls.

Each builder returns a RequestBody: the serialized XML plus the media type
the API expects in the Content-Type header.
"""

from collections import namedtuple
from typing import Iterable

from lxml import etree

from .base import vcloud_tag
from .constants import MEDIA_TYPE, VCLOUD_NS

RequestBody = namedtuple("RequestBody", ["data", "content_type"])

NSMAP = {None: VCLOUD_NS}


def _serialize(root) -> bytes:
    return etree.tostring(root, encoding="utf-8")


def disk_attach_or_detach_params(disk_href: str) -> RequestBody:
    root = etree.Element(vcloud_tag("DiskAttachOrDetachParams"), nsmap=NSMAP)
    etree.SubElement(root, vcloud_tag("Disk"), {
        "type": MEDIA_TYPE["DISK"],
        "href": disk_href,
    })
    return RequestBody(_serialize(root), MEDIA_TYPE["DISK_ATTACH_DETACH_PARAMS"])


def media_insert_or_eject_params(media_name: str, media_href: str) -> RequestBody:
    root = etree.Element(vcloud_tag("MediaInsertOrEjectParams"), nsmap=NSMAP)
    etree.SubElement(root, vcloud_tag("Media"), {
        "type": MEDIA_TYPE["MEDIA"],
        "name": media_name,
        "href": media_href,
    })
    return RequestBody(_serialize(root), MEDIA_TYPE["MEDIA_INSERT_EJECT_PARAMS"])


def undeploy_vapp_params(power_off_action: str = "default") -> RequestBody:
    root = etree.Element(vcloud_tag("UndeployVAppParams"), nsmap=NSMAP)
    etree.SubElement(root, vcloud_tag("UndeployPowerAction")).text = power_off_action
    return RequestBody(_serialize(root), MEDIA_TYPE["UNDEPLOY_VAPP_PARAMS"])


def recompose_vapp_params(
    vapp_name: str,
    source_hrefs: Iterable[str] = (),
    delete_hrefs: Iterable[str] = (),
) -> RequestBody:
    """
    Build RecomposeVAppParams.

    Args:
        vapp_name: Name of the vApp being recomposed
        source_hrefs: Templates/VMs whose VMs are added to the vApp
        delete_hrefs: VMs removed from the vApp
    """
    root = etree.Element(vcloud_tag("RecomposeVAppParams"), {"name": vapp_name}, nsmap=NSMAP)
    for href in source_hrefs:
        item = etree.SubElement(root, vcloud_tag("SourcedItem"))
        etree.SubElement(item, vcloud_tag("Source"), {"href": href})
    etree.SubElement(root, vcloud_tag("AllEULAsAccepted")).text = "true"
    for href in delete_hrefs:
        etree.SubElement(root, vcloud_tag("DeleteItem"), {"href": href})
    return RequestBody(_serialize(root), MEDIA_TYPE["RECOMPOSE_VAPP_PARAMS"])
