"""
VMSS Cleaner Module

Scale set cleanup and gateway health probe reconciliation for rolling deployments.
"""

from .cleaner import Cleaner, RefusedDeletionError, remove_failed_new_scaleset, update_vmss_probes
from .outcome import Outcome, OutcomeKind

__all__ = [
    'Cleaner',
    'RefusedDeletionError',
    'remove_failed_new_scaleset',
    'update_vmss_probes',
    'Outcome',
    'OutcomeKind'
]
