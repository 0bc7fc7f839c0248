"""
vCloud Director client SDK

Resource facades (VM, vApp, disk, network, catalog, VDC) over the vCloud
REST API. Every mutating call goes through a guard policy that checks the
resource's current state, then polls the resulting server-side task to
completion within a per-operation time limit.
"""

__version__ = "1.0.0"

from .catalog import Catalog
from .config import Settings, TimeLimits
from .connection import Connection
from .disk import Disk
from .errors import (
    ApiError,
    ApiRequestError,
    ApiTimeoutError,
    CloudError,
    ObjectNotFoundError,
    UnknownStatusError,
    VCloudSdkError,
    VmSuspendedError,
)
from .guards import GuardedActionExecutor, GuardPolicy, Operation, Verdict
from .ip_ranges import IpRange, IpRanges
from .network import Network
from .session import Session
from .status import ResourceStatus, TaskStatus, classify, is_status
from .tasks import TaskMonitor
from .vapp import VApp
from .vdc import VDC
from .vm import VM

__all__ = [
    "ApiError",
    "ApiRequestError",
    "ApiTimeoutError",
    "Catalog",
    "CloudError",
    "Connection",
    "Disk",
    "GuardPolicy",
    "GuardedActionExecutor",
    "IpRange",
    "IpRanges",
    "Network",
    "ObjectNotFoundError",
    "Operation",
    "ResourceStatus",
    "Session",
    "Settings",
    "TaskMonitor",
    "TaskStatus",
    "TimeLimits",
    "UnknownStatusError",
    "VApp",
    "VCloudSdkError",
    "VDC",
    "VM",
    "Verdict",
    "VmSuspendedError",
    "classify",
    "is_status",
]
