"""
Prefect tasks for rolling scale set deployments

Each task runs one decision pass and returns the retry signal; the calling
flow owns the polling loop.
"""
from typing import Optional

from prefect import task, get_run_logger

from .compute_utils import ScaleSetsClient, get_compute_client
from .config import CleanerConfig
from .vmss_cleaner import Cleaner


def _default_scale_sets_client() -> ScaleSetsClient:
    return ScaleSetsClient(get_compute_client())


@task(name="Remove Failed New Scaleset")
def remove_failed_new_scaleset_task(
    resource_group: str,
    target_name: str,
    vmss_client=None,
    config: Optional[CleanerConfig] = None
) -> bool:
    """
    Delete the scale set created by a failed rolling deployment.

    Returns:
        bool: True if the flow should call this task again later
    """
    logger = get_run_logger()
    cleaner = Cleaner(vmss_client or _default_scale_sets_client(), config or CleanerConfig.from_env())

    outcome = cleaner.remove_failed_new_scaleset(resource_group, target_name)
    logger.info(f"📊 Scale set cleanup for {target_name}: {outcome.kind.value}")
    return outcome.retry


@task(name="Update Gateway VMSS Probes")
def update_vmss_probes_task(
    resource_group: str,
    vmss_client=None,
    config: Optional[CleanerConfig] = None
) -> bool:
    """Reconcile the health probe on gateway scale sets; returns the retry signal"""
    logger = get_run_logger()
    cleaner = Cleaner(vmss_client or _default_scale_sets_client(), config or CleanerConfig.from_env())

    outcome = cleaner.update_vmss_probes(resource_group)
    logger.info(f"📊 Gateway probe reconciliation in {resource_group}: {outcome.kind.value}")
    return outcome.retry
