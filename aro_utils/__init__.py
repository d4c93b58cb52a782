"""
ARO Deployment Utilities Module

This module provides Azure Red Hat OpenShift deployment helpers: scale set
cleanup during rolling deployments, gateway probe reconciliation, and an
AppLens detector client.
"""

from .compute_utils import ScaleSetsClient, get_compute_client
from .config import CleanerConfig
from .vmss_cleaner import Cleaner, Outcome, OutcomeKind, remove_failed_new_scaleset, update_vmss_probes
from .applens import (
    AppLensClient,
    AppLensError,
    GetDetectorOptions,
    ListDetectorsOptions,
    ResponseMessageCollectionEnvelope,
    ResponseMessageEnvelope,
    get_applens_client,
)

__all__ = [
    'ScaleSetsClient',
    'get_compute_client',
    'CleanerConfig',
    'Cleaner',
    'Outcome',
    'OutcomeKind',
    'remove_failed_new_scaleset',
    'update_vmss_probes',
    'AppLensClient',
    'AppLensError',
    'GetDetectorOptions',
    'ListDetectorsOptions',
    'ResponseMessageCollectionEnvelope',
    'ResponseMessageEnvelope',
    'get_applens_client'
]
