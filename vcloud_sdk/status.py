"""
Status model for vCloud resources and tasks.

vCloud reports the power/lifecycle state of a vApp or VM as a numeric code in
the ``status`` attribute, and the state of a task as a string. Both are closed
mappings here: anything the API sends that is not in the tables raises
UnknownStatusError instead of being treated as some default.
"""

from enum import Enum
from typing import Dict

from .errors import UnknownStatusError


class ResourceStatus(str, Enum):
    FAILED_CREATION = "FAILED_CREATION"
    UNRESOLVED = "UNRESOLVED"
    RESOLVED = "RESOLVED"
    DEPLOYED = "DEPLOYED"
    SUSPENDED = "SUSPENDED"
    POWERED_ON = "POWERED_ON"
    WAITING_FOR_INPUT = "WAITING_FOR_INPUT"
    UNKNOWN = "UNKNOWN"
    UNRECOGNIZED = "UNRECOGNIZED"
    POWERED_OFF = "POWERED_OFF"
    INCONSISTENT_STATE = "INCONSISTENT_STATE"
    MIXED = "MIXED"


class TaskStatus(str, Enum):
    QUEUED = "queued"
    PRE_RUNNING = "preRunning"
    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"
    CANCELED = "canceled"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_TASK_STATUSES

    @property
    def is_failure(self) -> bool:
        return self in FAILED_TASK_STATUSES


FAILED_TASK_STATUSES = frozenset([TaskStatus.ERROR, TaskStatus.CANCELED, TaskStatus.ABORTED])
TERMINAL_TASK_STATUSES = FAILED_TASK_STATUSES | {TaskStatus.SUCCESS}

RESOURCE_STATUS_CODES: Dict[str, ResourceStatus] = {
    "-1": ResourceStatus.FAILED_CREATION,
    "0": ResourceStatus.UNRESOLVED,
    "1": ResourceStatus.RESOLVED,
    "2": ResourceStatus.DEPLOYED,
    "3": ResourceStatus.SUSPENDED,
    "4": ResourceStatus.POWERED_ON,
    "5": ResourceStatus.WAITING_FOR_INPUT,
    "6": ResourceStatus.UNKNOWN,
    "7": ResourceStatus.UNRECOGNIZED,
    "8": ResourceStatus.POWERED_OFF,
    "9": ResourceStatus.INCONSISTENT_STATE,
    "10": ResourceStatus.MIXED,
}

_CODES_BY_STATUS = {status: code for code, status in RESOURCE_STATUS_CODES.items()}

_missing = set(ResourceStatus) - set(_CODES_BY_STATUS)
if _missing:
    raise RuntimeError(f"Resource statuses without a raw code: {sorted(s.value for s in _missing)}")


def classify(raw) -> ResourceStatus:
    """
    Translate a raw resource status into a ResourceStatus.

    Accepts the numeric code as int or string, or an already symbolic
    name ("POWERED_ON").

    Raises:
        UnknownStatusError: If the value has no mapping
    """
    if isinstance(raw, ResourceStatus):
        return raw
    key = str(raw).strip() if raw is not None else ""
    if key in RESOURCE_STATUS_CODES:
        return RESOURCE_STATUS_CODES[key]
    try:
        return ResourceStatus(key)
    except ValueError:
        raise UnknownStatusError(raw, kind="resource") from None


def code_for(status) -> str:
    """Raw API code for a symbolic status (reverse of classify)."""
    return _CODES_BY_STATUS[classify(status)]


def classify_task(raw) -> TaskStatus:
    """
    Translate a raw task status string into a TaskStatus.

    Raises:
        UnknownStatusError: If the value has no mapping
    """
    if isinstance(raw, TaskStatus):
        return raw
    try:
        return TaskStatus(raw)
    except ValueError:
        raise UnknownStatusError(raw, kind="task") from None


def is_status(resource, candidate) -> bool:
    """True when the resource's current raw status maps to ``candidate``."""
    return classify(resource.status) is classify(candidate)
