"""Org VDC network facade"""

from .ip_ranges import IpRanges
from .mixins import InfrastructureMixin


class Network(InfrastructureMixin):
    KIND = "Network"

    @property
    def ip_ranges(self) -> IpRanges:
        return IpRanges(self.entity_xml.ip_ranges)
