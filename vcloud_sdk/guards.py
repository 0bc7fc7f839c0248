"""
Guarded actions.

Before a mutating request is issued, the current status of the resource it
affects is read fresh from the API and looked up in a guard policy table:

- NOOP       the resource is already in the requested state; nothing is sent
- FORBIDDEN  the state conflicts with the operation; a CloudError (or
             VmSuspendedError) naming the resource is raised
- PROCEED    extra preconditions run, the request is submitted and the task
             it returns is handed to the TaskMonitor

The guard check and the request are not atomic. If two callers act on the same
resource at once, the API server is the one that rejects the loser.
"""

import logging
from collections import namedtuple
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from .config import TimeLimits
from .errors import ApiRequestError, CloudError, VmSuspendedError
from .models import Task
from .status import ResourceStatus, classify

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    # Values double as TimeLimits keys
    POWER_ON = "power_on"
    POWER_OFF = "power_off"
    UNDEPLOY = "undeploy"
    ATTACH_DISK = "attach_disk"
    DETACH_DISK = "detach_disk"
    DELETE_VAPP = "delete_vapp"
    RECOMPOSE_VAPP = "recompose_vapp"
    INSERT_MEDIA = "insert_media"
    EJECT_MEDIA = "eject_media"


_unlimited = sorted(op.value for op in Operation if op.value not in TimeLimits.model_fields)
if _unlimited:
    raise RuntimeError(f"Operations without a configured time limit: {_unlimited}")


class Verdict(Enum):
    NOOP = "noop"
    PROCEED = "proceed"
    FORBIDDEN = "forbidden"


# message is a str.format template over kind, name and status
Rule = namedtuple("Rule", ["verdict", "error", "message"])

PROCEED = Rule(Verdict.PROCEED, None, None)

DEFAULT_RULES: Dict[Tuple[Operation, ResourceStatus], Rule] = {
    (Operation.POWER_ON, ResourceStatus.POWERED_ON): Rule(
        Verdict.NOOP, None, "{kind} {name} is already powered-on."),
    (Operation.POWER_OFF, ResourceStatus.POWERED_OFF): Rule(
        Verdict.NOOP, None, "{kind} {name} is already powered-off."),
    (Operation.POWER_OFF, ResourceStatus.SUSPENDED): Rule(
        Verdict.FORBIDDEN, VmSuspendedError,
        "{kind} {name} suspended, discard state before powering off."),
    (Operation.DETACH_DISK, ResourceStatus.SUSPENDED): Rule(
        Verdict.FORBIDDEN, VmSuspendedError,
        "{kind} {name} suspended, discard state before detaching disk."),
    (Operation.DELETE_VAPP, ResourceStatus.POWERED_ON): Rule(
        Verdict.FORBIDDEN, CloudError,
        "{kind} {name} is powered on, power-off before deleting."),
}


class GuardPolicy:
    """Lookup table (operation, status) -> Rule; anything unlisted proceeds."""

    def __init__(self, rules: Optional[Dict[Tuple[Operation, ResourceStatus], Rule]] = None):
        self.rules = dict(DEFAULT_RULES if rules is None else rules)

    def decide(self, operation: Operation, status) -> Rule:
        return self.rules.get((Operation(operation), classify(status)), PROCEED)


class GuardedActionExecutor:
    """Runs mutating operations through the guard policy and the task monitor."""

    def __init__(self, monitor, time_limits, policy: Optional[GuardPolicy] = None):
        """
        Args:
            monitor: TaskMonitor used for every submitted task
            time_limits: TimeLimits providing limit_for(kind)
            policy: GuardPolicy (defaults to DEFAULT_RULES)
        """
        self.monitor = monitor
        self.time_limits = time_limits
        self.policy = policy or GuardPolicy()

    def perform(
        self,
        resource,
        operation: Operation,
        submit: Callable[[Any], Any],
        time_limit_key: Optional[str] = None,
        preconditions: Iterable[Callable[[Any], None]] = (),
        on_success: Optional[Callable[[Any], Any]] = None,
    ):
        """
        Guard, submit and monitor one operation.

        Args:
            resource: Facade whose status guards the operation (exposes KIND and entity_xml)
            operation: Operation being attempted
            submit: Called with the resource snapshot; issues the request and returns its Task
            time_limit_key: TimeLimits key, defaults to the operation's value
            preconditions: Called with the snapshot before submitting; raise to forbid
            on_success: Passed through to TaskMonitor.monitor

        Returns:
            None for a no-op, otherwise the monitored result

        Raises:
            CloudError / VmSuspendedError: If the guard policy or a precondition forbids the operation
            ApiRequestError: If the request returns no task, or the task fails
            ApiTimeoutError: If the task does not finish in time
        """
        operation = Operation(operation)
        entity = resource.entity_xml
        status = classify(entity.status)
        context = {"kind": resource.KIND, "name": entity.name, "status": status.value}
        logger.debug(f"{resource.KIND} {entity.name} status: {status.value}")

        rule = self.policy.decide(operation, status)
        if rule.verdict is Verdict.NOOP:
            logger.info(rule.message.format(**context))
            return None
        if rule.verdict is Verdict.FORBIDDEN:
            raise rule.error(rule.message.format(**context))

        for check in preconditions:
            check(entity)

        task = submit(entity)
        if not isinstance(task, Task):
            raise ApiRequestError(
                f"Request to {operation.value.replace('_', ' ')} {resource.KIND} {entity.name} "
                f"did not return a task"
            )

        time_limit = self.time_limits.limit_for(time_limit_key or operation.value)
        return self.monitor.monitor(task, time_limit, on_success)
