"""
Scale set cleanup and gateway probe reconciliation

Both decisions do a single list-then-act pass against the scale set API and
report whether the caller's poller should invoke them again. Nothing here
sleeps or loops.
"""

import logging
from typing import Optional

from azure.mgmt.compute.models import ApiEntityReference

from ..config import CleanerConfig
from .outcome import Outcome


class RefusedDeletionError(RuntimeError):
    """Raised into a fatal outcome when deleting the target would empty the resource group"""


class Cleaner:
    """Decision logic for rolling scale set deployments"""

    def __init__(self, vmss_client, config: Optional[CleanerConfig] = None, logger: Optional[logging.Logger] = None):
        self.vmss = vmss_client
        self.config = config or CleanerConfig()
        self.logger = logger or logging.getLogger(__name__)

    def remove_failed_new_scaleset(self, resource_group: str, target_name: str) -> Outcome:
        """
        Delete a newly deployed scale set that failed to come up.

        Args:
            resource_group: Resource group holding the scale sets
            target_name: Name of the scale set created by the new deployment

        Returns:
            Outcome: retryable while the target is absent or after deleting it,
            fatal when listing or deleting fails
        """
        try:
            scalesets = self.vmss.list(resource_group)
        except Exception as e:
            self.logger.warning(f"⚠️ Failed to list scale sets in {resource_group}: {e}")
            return Outcome.fatal(e)

        if not scalesets:
            self.logger.info(f"⏳ No scale sets in {resource_group} yet")
            return Outcome.retryable("no scale sets found")

        names = [vmss.name for vmss in scalesets]
        if target_name not in names:
            self.logger.info(f"⏳ Scale set {target_name} not found in {resource_group}")
            return Outcome.retryable(f"{target_name} not found")

        # Never remove the last scale set serving the resource group
        if len(scalesets) == 1:
            error = RefusedDeletionError(
                f"{target_name} is the only scale set in {resource_group}, refusing to delete it"
            )
            self.logger.warning(f"⚠️ {error}")
            return Outcome.fatal(error)

        self.logger.info(f"🧹 Removing failed scale set {target_name} from {resource_group}")
        try:
            self.vmss.delete_and_wait(resource_group, target_name)
        except Exception as e:
            self.logger.error(f"❌ Failed to delete scale set {target_name}: {e}")
            return Outcome.fatal(e)

        self.logger.info(f"✅ Deleted scale set {target_name}")
        return Outcome.retryable(f"deleted {target_name}")

    def _desired_health_probe(self) -> Optional[ApiEntityReference]:
        probe_id = self.config.desired_health_probe_id
        if probe_id is None:
            return None
        return ApiEntityReference(id=probe_id)

    def update_vmss_probes(self, resource_group: str) -> Outcome:
        """Point every gateway scale set's health probe at the configured value"""
        try:
            scalesets = self.vmss.list(resource_group)
        except Exception as e:
            self.logger.warning(f"⚠️ Failed to list scale sets in {resource_group}: {e}")
            return Outcome.fatal(e)

        for vmss in scalesets:
            if not self.config.is_gateway(vmss.name):
                continue

            profile = getattr(vmss, "virtual_machine_profile", None)
            network_profile = getattr(profile, "network_profile", None)
            if network_profile is None:
                self.logger.warning(f"⚠️ Scale set {vmss.name} has no network profile, skipping")
                continue

            network_profile.health_probe = self._desired_health_probe()
            try:
                self.vmss.create_or_update_and_wait(resource_group, vmss.name, vmss)
            except Exception as e:
                self.logger.error(f"❌ Failed to update health probe on {vmss.name}: {e}")
                return Outcome.fatal(e)

            self.logger.info(f"✅ Updated health probe on {vmss.name}")

        return Outcome.converged()


def remove_failed_new_scaleset(vmss_client, resource_group: str, target_name: str,
                               config: Optional[CleanerConfig] = None) -> bool:
    """Boolean form of Cleaner.remove_failed_new_scaleset"""
    return Cleaner(vmss_client, config).remove_failed_new_scaleset(resource_group, target_name).retry


def update_vmss_probes(vmss_client, resource_group: str, config: Optional[CleanerConfig] = None) -> bool:
    """Boolean form of Cleaner.update_vmss_probes"""
    return Cleaner(vmss_client, config).update_vmss_probes(resource_group).retry
