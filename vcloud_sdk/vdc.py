"""Virtual data center facade"""

from typing import List

from .disk import Disk
from .errors import ObjectNotFoundError
from .mixins import InfrastructureMixin
from .network import Network
from .vapp import VApp


class VDC(InfrastructureMixin):
    KIND = "VDC"

    @property
    def vapps(self) -> List[VApp]:
        return [VApp(self._session, link.href) for link in self.entity_xml.vapps]

    def list_vapps(self) -> List[str]:
        return [link.name for link in self.entity_xml.vapps]

    def find_vapp_by_name(self, name: str) -> VApp:
        return VApp(self._session, self._find(self.entity_xml.vapps, name, "vApp"))

    @property
    def disks(self) -> List[Disk]:
        return [Disk(self._session, link.href) for link in self.entity_xml.disks]

    def list_disks(self) -> List[str]:
        return [link.name for link in self.entity_xml.disks]

    def find_disk_by_name(self, name: str) -> Disk:
        return Disk(self._session, self._find(self.entity_xml.disks, name, "Disk"))

    @property
    def networks(self) -> List[Network]:
        return [Network(self._session, link.href) for link in self.entity_xml.networks]

    def list_networks(self) -> List[str]:
        return [link.name for link in self.entity_xml.networks]

    def find_network_by_name(self, name: str) -> Network:
        return Network(self._session, self._find(self.entity_xml.networks, name, "Network"))

    @staticmethod
    def _find(links, name: str, label: str) -> str:
        for link in links:
            if link.name == name:
                return link.href
        raise ObjectNotFoundError(f"{label} '{name}' is not found")
