"""IP address ranges of an org VDC network."""

import ipaddress
from collections import namedtuple
from typing import Iterable, List, Tuple

IpRange = namedtuple("IpRange", ["first", "last"])


class IpRanges:
    """Ordered collection of inclusive IPv4 ranges."""

    def __init__(self, ranges: Iterable[Tuple[str, str]] = ()):
        self.ranges: List[IpRange] = []
        for first, last in ranges:
            self.add(first, last)

    def add(self, first: str, last: str) -> None:
        start = ipaddress.IPv4Address(first)
        end = ipaddress.IPv4Address(last)
        if start > end:
            raise ValueError(f"Invalid IP range {first}-{last}: start is after end")
        self.ranges.append(IpRange(start, end))

    def __contains__(self, address) -> bool:
        address = ipaddress.IPv4Address(address)
        return any(r.first <= address <= r.last for r in self.ranges)

    @property
    def address_count(self) -> int:
        return sum(int(r.last) - int(r.first) + 1 for r in self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def __iter__(self):
        return iter(self.ranges)

    def __repr__(self):
        spans = ", ".join(f"{r.first}-{r.last}" for r in self.ranges)
        return f"<IpRanges [{spans}]>"
