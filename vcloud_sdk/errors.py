"""
vCloud SDK Error Taxonomy

Every error raised by the SDK itself derives from VCloudSdkError. Transport
failures (requests.HTTPError and friends) are deliberately absent: they
propagate to the caller exactly as the HTTP layer raised them.
"""

from typing import Optional


class VCloudSdkError(Exception):
    """Base exception for vCloud SDK operations"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class CloudError(VCloudSdkError):
    """The requested operation conflicts with the current state of a resource"""


class VmSuspendedError(CloudError):
    """The operation is not allowed while the VM or its vApp is suspended"""

    def __init__(self, message: str):
        super().__init__(message, error_code="SUSPENDED")


class ObjectNotFoundError(VCloudSdkError):
    """A named lookup (VM, disk, catalog, catalog item, ...) found nothing"""

    def __init__(self, message: str):
        super().__init__(message, error_code="NOT_FOUND")


class UnknownStatusError(VCloudSdkError):
    """A raw status value has no mapping in the status model"""

    def __init__(self, raw, kind: str = "resource"):
        message = f"Unknown {kind} status '{raw}'"
        super().__init__(message, error_code="UNKNOWN_STATUS")
        self.raw = raw
        self.kind = kind


class ApiError(VCloudSdkError):
    """Base for failures reported by the API for an asynchronous task"""


class ApiRequestError(ApiError):
    """
    A monitored task finished in a failure state, or a request that should
    have produced a task did not.
    """

    def __init__(self, message: str, task=None, detail: Optional[str] = None,
                 error_code: Optional[str] = None):
        super().__init__(message, error_code=error_code)
        self.task = task
        self.detail = detail


class ApiTimeoutError(ApiError):
    """A monitored task did not reach a terminal state within its time limit"""

    def __init__(self, task, time_limit):
        description = getattr(task, "operation", None) or getattr(task, "href", "")
        message = f"Task {description} did not complete within limit of {time_limit} seconds."
        super().__init__(message, error_code="TIMEOUT")
        self.task = task
        self.time_limit = time_limit
