"""
VM facade.

Power operations come from PowerableMixin; disk and media operations are
built here on the same guarded-action pattern.
"""

import logging
from typing import List

from .errors import CloudError
from .guards import Operation
from .mixins import InfrastructureMixin, PowerableMixin
from .models.params import disk_attach_or_detach_params, media_insert_or_eject_params

logger = logging.getLogger(__name__)


class VM(PowerableMixin, InfrastructureMixin):
    KIND = "VM"

    @property
    def vapp(self):
        """The vApp this VM belongs to."""
        from .vapp import VApp

        link = self.entity_xml.vapp_link
        if link is None:
            raise CloudError(f"VM {self.name} has no parent vApp link")
        return VApp(self._session, link.href)

    @property
    def independent_disks(self) -> List:
        from .disk import Disk

        return [Disk(self._session, hard_disk.disk_href)
                for hard_disk in self.entity_xml.hard_disks
                if hard_disk.disk_href]

    def list_disks(self) -> List[str]:
        """Names of all hard disks; independent disks carry their disk name in parentheses."""
        from .disk import Disk

        names = []
        for hard_disk in self.entity_xml.hard_disks:
            if hard_disk.disk_href:
                disk_name = Disk(self._session, hard_disk.disk_href).name
                names.append(f"{hard_disk.name} ({disk_name})")
            else:
                names.append(hard_disk.name)
        return names

    def attach_disk(self, disk):
        """
        Attach an independent disk to this VM.

        Args:
            disk: vcloud_sdk.Disk that is not attached to any VM

        Returns:
            Task: The completed attach task

        Raises:
            CloudError: If the disk is already attached to a VM
        """
        def check_not_attached(entity):
            if disk.is_attached():
                raise CloudError(
                    f"Disk '{disk.name}' of link {disk.href} is attached to VM '{disk.vm.name}'"
                )

        def check_link(entity):
            if entity.attach_disk_link is None:
                raise CloudError(f"VM {entity.name} does not allow attaching disks.")

        def submit(entity):
            logger.info(f"Attaching disk '{disk.name}' to VM '{entity.name}'.")
            body = disk_attach_or_detach_params(disk.href)
            return self.connection.post(entity.attach_disk_link.href, body.data, body.content_type)

        task = self._perform(Operation.ATTACH_DISK, submit,
                             preconditions=[check_not_attached, check_link])
        logger.info(f"Disk '{disk.name}' is attached to VM '{self.name}'")
        return task

    def detach_disk(self, disk):
        """
        Detach an independent disk from this VM.

        Guarded on the status of the parent vApp: a suspended vApp must have
        its state discarded first.

        Args:
            disk: vcloud_sdk.Disk attached to this VM

        Returns:
            Task: The completed detach task

        Raises:
            VmSuspendedError: If the parent vApp is suspended
            CloudError: If the disk is not attached, or attached to another VM
        """
        def check_attached_here(vapp_entity):
            vm = disk.vm
            if vm.href != self.href:
                raise CloudError(
                    f"Disk '{disk.name}' is attached to other VM - name: '{vm.name}', link '{vm.href}'"
                )

        def submit(vapp_entity):
            entity = self.entity_xml
            if entity.detach_disk_link is None:
                raise CloudError(f"VM {entity.name} does not allow detaching disks.")
            logger.info(f"Detaching disk '{disk.name}' from VM '{entity.name}'.")
            body = disk_attach_or_detach_params(disk.href)
            return self.connection.post(entity.detach_disk_link.href, body.data, body.content_type)

        task = self._perform(Operation.DETACH_DISK, submit,
                             preconditions=[check_attached_here], guarded=self.vapp)
        logger.info(f"Disk '{disk.name}' is detached from VM '{self.name}'")
        return task

    def insert_media(self, catalog_name: str, media_name: str):
        """
        Insert a media file from a catalog into this VM's CD drive.

        Waits for tasks already running on the media (e.g. an upload)
        before inserting.

        Raises:
            ObjectNotFoundError: If the catalog or media item does not exist
        """
        media = self._find_media(catalog_name, media_name)

        def check_link(entity):
            if entity.insert_media_link is None:
                raise CloudError(f"VM {entity.name} does not allow inserting media.")

        def submit(entity):
            logger.info(f"Inserting media '{media_name}' into VM '{entity.name}'.")
            body = media_insert_or_eject_params(media.name, media.href)
            return self.connection.post(entity.insert_media_link.href, body.data, body.content_type)

        task = self._perform(Operation.INSERT_MEDIA, submit, preconditions=[check_link])
        logger.info(f"Media '{media_name}' is inserted into VM '{self.name}'.")
        return task

    def eject_media(self, catalog_name: str, media_name: str):
        """
        Eject a media file from this VM's CD drive.

        Raises:
            ObjectNotFoundError: If the catalog or media item does not exist
        """
        media = self._find_media(catalog_name, media_name)

        def check_link(entity):
            if entity.eject_media_link is None:
                raise CloudError(f"VM {entity.name} does not allow ejecting media.")

        def submit(entity):
            logger.info(f"Ejecting media '{media_name}' from VM '{entity.name}'.")
            body = media_insert_or_eject_params(media.name, media.href)
            return self.connection.post(entity.eject_media_link.href, body.data, body.content_type)

        task = self._perform(Operation.EJECT_MEDIA, submit, preconditions=[check_link])
        logger.info(f"Media '{media_name}' is ejected from VM '{self.name}'.")
        return task

    def _find_media(self, catalog_name: str, media_name: str):
        catalog = self.find_catalog_by_name(catalog_name)
        media_link = catalog.find_media_by_name(media_name)
        media = self.connection.get(media_link.href)
        self.wait_for_running_tasks(media, f"Media '{media_name}'")
        return media
