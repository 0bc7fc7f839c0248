"""Shared functionality mixins for vCloud resource facades"""

from .infrastructure import InfrastructureMixin
from .powerable import PowerableMixin

__all__ = ['InfrastructureMixin', 'PowerableMixin']
