"""vApp facade"""

import logging
from typing import List

from .errors import CloudError, ObjectNotFoundError
from .guards import Operation
from .mixins import InfrastructureMixin, PowerableMixin
from .models.params import recompose_vapp_params
from .status import classify
from .vm import VM

logger = logging.getLogger(__name__)


class VApp(PowerableMixin, InfrastructureMixin):
    KIND = "vApp"

    def delete(self):
        """
        Delete the vApp.

        Tasks already running on the vApp are waited for first.

        Returns:
            Task: The completed delete task

        Raises:
            CloudError: If the vApp is powered on
        """
        vapp_name = None

        def check_link(entity):
            if entity.remove_link is None:
                raise CloudError(f"vApp {entity.name} can not be deleted in status '{classify(entity.status).value}'.")

        def submit(entity):
            nonlocal vapp_name
            vapp_name = entity.name
            self.wait_for_running_tasks(entity, f"vApp {vapp_name}")
            logger.info(f"Deleting vApp {vapp_name}.")
            return self.connection.delete(entity.remove_link.href)

        def deleted(task):
            logger.info(f"vApp {vapp_name} deleted.")
            return task

        return self._perform(Operation.DELETE_VAPP, submit,
                             preconditions=[check_link], on_success=deleted)

    def recompose_from_vapp_template(self, catalog_name: str, template_name: str):
        """
        Add the VMs of a catalog vApp template to this vApp.

        Returns:
            VApp: self

        Raises:
            ObjectNotFoundError: If the catalog or template does not exist
            CloudError: If the vApp is not in a recomposable state
        """
        logger.info(f"Recomposing from template '{template_name}' in catalog '{catalog_name}'.")
        catalog = self.find_catalog_by_name(catalog_name)
        template = catalog.find_vapp_template_by_name(template_name)

        def submit(entity):
            body = recompose_vapp_params(entity.name, source_hrefs=[template.href])
            return self.connection.post(entity.recompose_vapp_link.href, body.data, body.content_type)

        self._perform(Operation.RECOMPOSE_VAPP, submit, preconditions=[self._check_recomposable])
        logger.info(f"vApp {self.name} is recomposed.")
        return self

    def remove_vm_by_name(self, vm_name: str):
        """
        Remove one VM from the vApp by recomposing without it.

        Returns:
            VApp: self

        Raises:
            ObjectNotFoundError: If the vApp has no VM of that name
            CloudError: If the vApp is not in a recomposable state
        """
        target_vm = self.find_vm_by_name(vm_name)

        def submit(entity):
            body = recompose_vapp_params(entity.name, delete_hrefs=[target_vm.href])
            return self.connection.post(entity.recompose_vapp_link.href, body.data, body.content_type)

        self._perform(Operation.RECOMPOSE_VAPP, submit, preconditions=[self._check_recomposable])
        logger.info(f"VM {vm_name} is removed.")
        return self

    @property
    def vms(self) -> List[VM]:
        return [VM(self._session, vm.href) for vm in self.entity_xml.vms]

    def list_vms(self) -> List[str]:
        return [vm.name for vm in self.entity_xml.vms]

    def find_vm_by_name(self, name: str) -> VM:
        for vm in self.entity_xml.vms:
            if vm.name == name:
                return VM(self._session, vm.href)
        raise ObjectNotFoundError(f"VM '{name}' is not found")

    @staticmethod
    def _check_recomposable(entity):
        # The API only offers recompose while the vApp is powered off or suspended
        if entity.recompose_vapp_link is None:
            raise CloudError(
                f"VApp is in status of '{classify(entity.status).value}' and can not be recomposed"
            )
