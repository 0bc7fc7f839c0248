"""Power operations shared by VMs and vApps"""

import logging

from ..errors import CloudError
from ..guards import Operation
from ..models.params import undeploy_vapp_params

logger = logging.getLogger(__name__)


class PowerableMixin:
    """
    power_on / power_off for facades whose entity advertises power links.

    Requires InfrastructureMixin. Both operations are idempotent: asking for
    the state the resource is already in sends nothing and returns None.
    """

    def power_on(self):
        """
        Power on the VM or vApp.

        Returns:
            Task: The completed power-on task, or None if already powered on

        Raises:
            CloudError: If the entity does not offer a power-on action
            ApiRequestError / ApiTimeoutError: If the task fails or times out
        """
        def check_link(entity):
            if entity.power_on_link is None:
                raise CloudError(f"{self.KIND} {entity.name} not in a state able to power on.")

        def submit(entity):
            logger.info(f"Powering on {self.KIND} {entity.name}.")
            return self.connection.post(entity.power_on_link.href, None)

        task = self._perform(Operation.POWER_ON, submit, preconditions=[check_link])
        if task is not None:
            logger.info(f"{self.KIND} {self.name} is powered on.")
        return task

    def power_off(self):
        """
        Power off the VM or vApp, then undeploy it if the API offers that.

        Returns:
            Task: The completed power-off task, or None if already powered off

        Raises:
            VmSuspendedError: If the resource is suspended
            CloudError: If the entity does not offer a power-off action
            ApiRequestError / ApiTimeoutError: If a task fails or times out
        """
        def check_link(entity):
            if entity.power_off_link is None:
                raise CloudError(f"{self.KIND} {entity.name} is not in a state that could be powered off.")

        def submit(entity):
            logger.info(f"Powering off {self.KIND} {entity.name}.")
            return self.connection.post(entity.power_off_link.href, None)

        task = self._perform(Operation.POWER_OFF, submit, preconditions=[check_link])
        if task is None:
            return None
        logger.info(f"{self.KIND} {self.name} is powered off.")

        self._undeploy()
        return task

    def _undeploy(self):
        # A powered-off resource stays deployed (holding its resources) until undeployed
        entity = self.entity_xml
        if entity.undeploy_link is None:
            return None

        def submit(current):
            logger.info(f"Undeploying {self.KIND} {current.name}.")
            body = undeploy_vapp_params()
            return self.connection.post(current.undeploy_link.href, body.data, body.content_type)

        task = self._perform(Operation.UNDEPLOY, submit)
        logger.info(f"{self.KIND} {entity.name} is undeployed.")
        return task
