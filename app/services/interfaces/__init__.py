"""
Service interfaces for dependency inversion.
Allows swapping implementations without changing business logic.
"""

from .access_policy import Principal, ShowAccessPolicy
from .allow_all_policy import AllowAllPolicy

__all__ = ['Principal', 'ShowAccessPolicy', 'AllowAllPolicy']
