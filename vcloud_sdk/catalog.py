"""Catalog facade"""

from typing import List, Optional

from .errors import ObjectNotFoundError
from .mixins import InfrastructureMixin
from .models import MEDIA_TYPE


class Catalog(InfrastructureMixin):
    KIND = "Catalog"

    @property
    def items(self) -> List:
        """Wrapped CatalogItem documents of every item in the catalog."""
        return [self.connection.get(link.href) for link in self.entity_xml.catalog_items]

    def list_items(self) -> List[str]:
        return [link.name for link in self.entity_xml.catalog_items]

    def find_item(self, name: str, item_type: Optional[str] = None):
        """
        Find a catalog item by name, optionally restricted to the media type
        of the entity it points at.

        Raises:
            ObjectNotFoundError: If no matching item exists
        """
        for link in self.entity_xml.catalog_items:
            if link.name != name:
                continue
            item = self.connection.get(link.href)
            entity = item.entity
            if item_type is None or (entity is not None and entity.type == item_type):
                return item
        raise ObjectNotFoundError(f"Catalog Item '{name}' is not found")

    def find_vapp_template_by_name(self, name: str):
        """Link to the vApp template entity behind a catalog item."""
        return self.find_item(name, MEDIA_TYPE["VAPP_TEMPLATE"]).entity

    def find_media_by_name(self, name: str):
        """Link to the media entity behind a catalog item."""
        return self.find_item(name, MEDIA_TYPE["MEDIA"]).entity
