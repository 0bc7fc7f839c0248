"""Wrappers for the vCloud entities the SDK reads."""

from collections import namedtuple
from typing import List, Optional

from ..status import classify_task
from .base import Link, Wrapper, register, vcloud_tag
from .constants import (
    HARD_DISK_RESOURCE_TYPE,
    MEDIA_TYPE,
    OVF_NS,
    RASD_NS,
    REL_DISK_ATTACH,
    REL_DISK_DETACH,
    REL_DOWN,
    REL_EJECT_MEDIA,
    REL_INSERT_MEDIA,
    REL_POWER_OFF,
    REL_POWER_ON,
    REL_RECOMPOSE,
    REL_REMOVE,
    REL_UNDEPLOY,
    REL_UP,
    VCLOUD_NS,
)

HardDisk = namedtuple("HardDisk", ["name", "disk_href"])


class TaskOwnerMixin:
    """Entities that embed their in-flight tasks in a <Tasks> element."""

    @property
    def tasks(self) -> List["Task"]:
        container = self.element.find(vcloud_tag("Tasks"))
        if container is None:
            return []
        return [Task(e) for e in container.findall(vcloud_tag("Task"))]

    @property
    def running_tasks(self) -> List["Task"]:
        # unmapped statuses raise UnknownStatusError
        return [t for t in self.tasks if not classify_task(t.status).is_terminal]


class PowerLinksMixin:

    @property
    def power_on_link(self) -> Optional[Link]:
        return self.find_link(REL_POWER_ON)

    @property
    def power_off_link(self) -> Optional[Link]:
        return self.find_link(REL_POWER_OFF)

    @property
    def undeploy_link(self) -> Optional[Link]:
        return self.find_link(REL_UNDEPLOY)


@register("Error")
class Error(Wrapper):

    @property
    def message(self) -> Optional[str]:
        return self.element.get("message")

    @property
    def major_error_code(self) -> Optional[str]:
        return self.element.get("majorErrorCode")

    @property
    def minor_error_code(self) -> Optional[str]:
        return self.element.get("minorErrorCode")

    def __str__(self):
        return f"{self.message} (major: {self.major_error_code}, minor: {self.minor_error_code})"


@register("Task")
class Task(Wrapper):

    @property
    def operation(self) -> Optional[str]:
        return self.element.get("operation")

    @property
    def operation_name(self) -> Optional[str]:
        return self.element.get("operationName")

    @property
    def urn(self) -> Optional[str]:
        return self.element.get("id")

    @property
    def progress(self) -> Optional[int]:
        text = self.child_text("Progress")
        return int(text) if text else None

    @property
    def error(self) -> Optional[Error]:
        element = self.element.find(vcloud_tag("Error"))
        return Error(element) if element is not None else None


@register("Session")
class SessionDocument(Wrapper):

    def org_link(self, name: str) -> Optional[Link]:
        for link in self.find_links(REL_DOWN, MEDIA_TYPE["ORG"]):
            if link.name == name:
                return link
        return None


@register("Org")
class Org(Wrapper):

    @property
    def vdc_links(self) -> List[Link]:
        return self.find_links(REL_DOWN, MEDIA_TYPE["VDC"])

    @property
    def catalog_links(self) -> List[Link]:
        return self.find_links(REL_DOWN, MEDIA_TYPE["CATALOG"])

    @property
    def network_links(self) -> List[Link]:
        return self.find_links(REL_DOWN, MEDIA_TYPE["ORG_VDC_NETWORK"])


@register("Vdc")
class Vdc(Wrapper):

    def _entities(self, media_type: str) -> List[Link]:
        container = self.element.find(vcloud_tag("ResourceEntities"))
        if container is None:
            return []
        return [Link(e) for e in container.findall(vcloud_tag("ResourceEntity"))
                if e.get("type") == media_type]

    @property
    def vapps(self) -> List[Link]:
        return self._entities(MEDIA_TYPE["VAPP"])

    @property
    def disks(self) -> List[Link]:
        return self._entities(MEDIA_TYPE["DISK"])

    @property
    def networks(self) -> List[Link]:
        container = self.element.find(vcloud_tag("AvailableNetworks"))
        if container is None:
            return []
        return [Link(e) for e in container.findall(vcloud_tag("Network"))]


@register("VApp")
class VApp(TaskOwnerMixin, PowerLinksMixin, Wrapper):

    @property
    def vms(self) -> List["Vm"]:
        children = self.element.find(vcloud_tag("Children"))
        if children is None:
            return []
        return [Vm(e) for e in children.findall(vcloud_tag("Vm"))]

    @property
    def recompose_vapp_link(self) -> Optional[Link]:
        return self.find_link(REL_RECOMPOSE)

    @property
    def remove_link(self) -> Optional[Link]:
        return self.find_link(REL_REMOVE)


@register("Vm")
class Vm(TaskOwnerMixin, PowerLinksMixin, Wrapper):

    @property
    def vapp_link(self) -> Optional[Link]:
        return self.find_link(REL_UP, MEDIA_TYPE["VAPP"])

    @property
    def attach_disk_link(self) -> Optional[Link]:
        return self.find_link(REL_DISK_ATTACH)

    @property
    def detach_disk_link(self) -> Optional[Link]:
        return self.find_link(REL_DISK_DETACH)

    @property
    def insert_media_link(self) -> Optional[Link]:
        return self.find_link(REL_INSERT_MEDIA)

    @property
    def eject_media_link(self) -> Optional[Link]:
        return self.find_link(REL_EJECT_MEDIA)

    @property
    def hard_disks(self) -> List[HardDisk]:
        section = self.element.find(f"{{{OVF_NS}}}VirtualHardwareSection")
        if section is None:
            return []
        disks = []
        for item in section.findall(f"{{{OVF_NS}}}Item"):
            if item.findtext(f"{{{RASD_NS}}}ResourceType") != HARD_DISK_RESOURCE_TYPE:
                continue
            host_resource = item.find(f"{{{RASD_NS}}}HostResource")
            disk_href = None
            if host_resource is not None:
                disk_href = host_resource.get(f"{{{VCLOUD_NS}}}disk")
            disks.append(HardDisk(item.findtext(f"{{{RASD_NS}}}ElementName"), disk_href))
        return disks


@register("Disk")
class Disk(TaskOwnerMixin, Wrapper):

    @property
    def size_mb(self) -> Optional[int]:
        size = self.element.get("size")
        return int(size) // (1024 * 1024) if size else None

    @property
    def attached_vms_link(self) -> Optional[Link]:
        return self.find_link(REL_DOWN, MEDIA_TYPE["VMS"])


@register("Vms")
class Vms(Wrapper):

    @property
    def vm_references(self) -> List[Link]:
        return [Link(e) for e in self.element.findall(vcloud_tag("VmReference"))]


@register("Media")
class Media(TaskOwnerMixin, Wrapper):
    pass


@register("Catalog")
class Catalog(Wrapper):

    @property
    def catalog_items(self) -> List[Link]:
        container = self.element.find(vcloud_tag("CatalogItems"))
        if container is None:
            return []
        return [Link(e) for e in container.findall(vcloud_tag("CatalogItem"))]


@register("CatalogItem")
class CatalogItem(Wrapper):

    @property
    def entity(self) -> Optional[Link]:
        element = self.element.find(vcloud_tag("Entity"))
        return Link(element) if element is not None else None


@register("OrgVdcNetwork")
class OrgVdcNetwork(Wrapper):

    @property
    def ip_ranges(self) -> List[tuple]:
        """(start, end) address strings of every configured range."""
        ranges = []
        for ip_range in self.element.iter(vcloud_tag("IpRange")):
            ranges.append((ip_range.findtext(vcloud_tag("StartAddress")),
                           ip_range.findtext(vcloud_tag("EndAddress"))))
        return ranges
