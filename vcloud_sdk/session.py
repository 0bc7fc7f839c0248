"""
vCloud Session

Ties together the connection, the immutable settings, the TaskMonitor and
the GuardedActionExecutor that every facade created from this session uses.
"""

import logging
import time
from typing import Callable, List, Optional

from .catalog import Catalog
from .config import Settings
from .connection import Connection
from .errors import CloudError, ObjectNotFoundError
from .guards import GuardedActionExecutor, GuardPolicy
from .tasks import TaskMonitor
from .vdc import VDC

logger = logging.getLogger(__name__)


class Session:
    """Logged-in session against one organization."""

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        org_name: str,
        settings: Optional[Settings] = None,
        connection=None,
        policy: Optional[GuardPolicy] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            url: Base URL of vCloud Director
            username: Organization user name
            password: User password
            org_name: Organization name
            settings: SDK settings; built from the environment when omitted
            connection: Pre-built connection (skips login)
            policy: Guard policy override
            sleep: Sleep function used between task polls
            clock: Monotonic clock used for task time limits
        """
        self.org_name = org_name
        self.settings = settings or Settings()

        if connection is None:
            connection = Connection(url, username, password, org_name, self.settings)
            self.session_xml = connection.login()
        else:
            self.session_xml = None
        self.connection = connection

        self.monitor = TaskMonitor(connection, self.settings.poll_interval, sleep=sleep, clock=clock)
        self.executor = GuardedActionExecutor(self.monitor, self.time_limits, policy)
        self._org_href = None

    def close(self):
        """Release the HTTP session held by the connection."""
        self.connection.close()

    @property
    def time_limits(self):
        return self.settings.time_limits

    @property
    def org(self):
        """Current representation of the session's organization."""
        if self._org_href is None:
            session_xml = self.session_xml or self.connection.get("/api/session")
            link = session_xml.org_link(self.org_name)
            if link is None:
                raise CloudError(f"Session has no access to organization '{self.org_name}'")
            self._org_href = link.href
        return self.connection.get(self._org_href)

    @property
    def vdcs(self) -> List[VDC]:
        return [VDC(self, link.href) for link in self.org.vdc_links]

    def find_vdc_by_name(self, name: str) -> VDC:
        for link in self.org.vdc_links:
            if link.name == name:
                return VDC(self, link.href)
        raise ObjectNotFoundError(f"VDC '{name}' is not found")

    @property
    def catalogs(self) -> List[Catalog]:
        return [Catalog(self, link.href) for link in self.org.catalog_links]

    def list_catalogs(self) -> List[str]:
        return [link.name for link in self.org.catalog_links]

    def find_catalog_by_name(self, name: str) -> Catalog:
        for link in self.org.catalog_links:
            if link.name == name:
                return Catalog(self, link.href)
        raise ObjectNotFoundError(f"Catalog '{name}' is not found")
