"""
Configuration for the vCloud SDK.

Reads from environment variables (VCLOUD_ prefix) with sensible defaults.
A Settings instance is built once and handed to the Session; it is frozen
so nothing can change time limits behind a running operation.
"""

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class TimeLimits(BaseModel):
    """Seconds allowed for a task, per kind of operation."""

    default: int = 120
    power_on: int = 600
    power_off: int = 600
    undeploy: int = 720
    delete_vapp: int = 120
    recompose_vapp: int = 300
    attach_disk: int = 300
    detach_disk: int = 300
    insert_media: int = 300
    eject_media: int = 300

    class Config:
        frozen = True

    def limit_for(self, kind: str) -> int:
        """
        Get the time limit for an operation kind.

        Args:
            kind: Operation kind (e.g. 'power_on', 'delete_vapp')

        Returns:
            int: Time limit in seconds

        Raises:
            ValueError: If the kind has no configured limit
        """
        if kind not in type(self).model_fields:
            raise ValueError(f"No time limit configured for operation kind '{kind}'")
        return getattr(self, kind)


class Settings(BaseSettings):
    """SDK settings loaded from environment."""

    # Task polling
    poll_interval: float = 1.0

    # HTTP transport
    verify_ssl: bool = False
    api_version: str = "5.1"
    request_timeout: int = 240

    # Per-operation task limits (VCLOUD_TIME_LIMITS__POWER_ON=900)
    time_limits: TimeLimits = TimeLimits()

    class Config:
        env_prefix = "VCLOUD_"
        env_nested_delimiter = "__"
        frozen = True
