"""
Task monitoring for vCloud asynchronous operations.

Every mutating vCloud call returns a Task right away and does its work in
the background. TaskMonitor polls that task until it reaches a terminal
status or its time limit runs out:

- status 'success' -> success callback (if any) and return
- status 'error', 'canceled' or 'aborted' -> ApiRequestError
- still queued/running at the limit -> ApiTimeoutError

Timing out does not cancel anything server-side; the task keeps running.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, Optional

from .errors import ApiRequestError, ApiTimeoutError
from .status import TaskStatus, classify_task

logger = logging.getLogger(__name__)


class MonitorState(Enum):
    POLLING = "polling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


def task_is_success(task) -> bool:
    return classify_task(task.status) is TaskStatus.SUCCESS


def task_has_error(task) -> bool:
    return classify_task(task.status).is_failure


class TaskMonitor:
    """Polls vCloud tasks to a terminal outcome."""

    def __init__(
        self,
        connection,
        poll_interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the monitor.

        Args:
            connection: Anything with get(target) returning the task's current representation
            poll_interval: Seconds between polls
            sleep: Sleep function (injectable for tests)
            clock: Monotonic clock (injectable for tests)
        """
        self.connection = connection
        self.poll_interval = poll_interval
        self._sleep = sleep
        self._clock = clock

    def monitor(
        self,
        task,
        time_limit,
        on_success: Optional[Callable[[Any], Any]] = None,
    ):
        """
        Poll a task until completion, failure, or timeout.

        A task that is already terminal when handed in is resolved without
        any further request.

        Args:
            task: Task wrapper returned by the triggering request
            time_limit: Maximum wait time in seconds
            on_success: Called once with the final task on success; its
                return value becomes the return value of monitor()

        Returns:
            The final task, or whatever on_success returned

        Raises:
            ApiRequestError: If the task ends in error, canceled or aborted
            ApiTimeoutError: If the task is not terminal within time_limit
        """
        start_time = self._clock()
        current = task
        last_status = None
        state = MonitorState.POLLING

        while state is MonitorState.POLLING:
            status = classify_task(current.status)

            if status is not last_status:
                logger.debug(f"Task {current.urn} {current.operation} is {status.value}")
                last_status = status

            if status is TaskStatus.SUCCESS:
                state = MonitorState.SUCCEEDED
            elif status.is_failure:
                state = MonitorState.FAILED
            elif (self._clock() - start_time) >= time_limit:
                state = MonitorState.TIMED_OUT
            else:
                self._sleep(self.poll_interval)
                current = self.connection.get(current.href)

        if state is MonitorState.SUCCEEDED:
            logger.debug(f"Task {current.operation} completed successfully")
            if on_success is not None:
                return on_success(current)
            return current

        if state is MonitorState.FAILED:
            raise self._task_failure(current)

        logger.error(f"Task {current.operation} timed out after {time_limit} seconds")
        raise ApiTimeoutError(current, time_limit)

    def wait_for_running_tasks(self, entity, label: str, time_limit) -> None:
        """
        Block until every task already running on ``entity`` finishes.

        Args:
            entity: Wrapper exposing running_tasks (vApp, VM, media, disk)
            label: Human-readable name for logging, e.g. "vApp web-01"
            time_limit: Limit applied to each running task
        """
        running = entity.running_tasks
        if not running:
            return

        logger.info(f"{label} has tasks in progress, wait until done.")
        for task in running:
            self.monitor(task, time_limit)
        logger.info(f"{label} tasks done.")

    @staticmethod
    def _task_failure(task) -> ApiRequestError:
        status = classify_task(task.status)
        error = task.error
        detail = str(error) if error is not None else None
        message = f"Task {task.operation} finished with status '{status.value}'"
        if detail:
            message = f"{message}: {detail}"
        return ApiRequestError(message, task=task, detail=detail, error_code=status.value)
