"""Independent disk facade"""

from typing import Optional

from .errors import CloudError
from .mixins import InfrastructureMixin


class Disk(InfrastructureMixin):
    """An independent disk; attached to at most one VM at a time."""

    KIND = "Disk"

    @property
    def size_mb(self) -> Optional[int]:
        return self.entity_xml.size_mb

    def is_attached(self) -> bool:
        return self._vm_reference() is not None

    @property
    def vm(self):
        """
        The VM this disk is attached to.

        Raises:
            CloudError: If the disk is not attached to any VM
        """
        from .vm import VM

        reference = self._vm_reference()
        if reference is None:
            raise CloudError(f"No vm is attached to disk '{self.name}'")
        return VM(self._session, reference.href)

    def _vm_reference(self):
        link = self.entity_xml.attached_vms_link
        if link is None:
            return None
        references = self.connection.get(link.href).vm_references
        return references[0] if references else None
