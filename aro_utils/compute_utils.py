"""
Azure Compute utilities for virtual machine scale set management
"""
import logging
import os
from typing import Any, List, Optional

from azure.identity import DefaultAzureCredential
from azure.mgmt.compute import ComputeManagementClient
from azure.mgmt.compute.models import VirtualMachineScaleSet


def get_compute_client(subscription_id: Optional[str] = None) -> ComputeManagementClient:
    """Get authenticated compute management client using managed identity"""
    subscription_id = subscription_id or os.getenv("AZURE_SUBSCRIPTION_ID")
    if not subscription_id:
        raise ValueError("AZURE_SUBSCRIPTION_ID environment variable is required")

    credential = DefaultAzureCredential()
    return ComputeManagementClient(credential, subscription_id)


class ScaleSetsClient:
    """
    Minimal blocking wrapper around the scale set operations.

    Long-running operations are started and then awaited on the poller, so every
    call returns only once Azure reports completion. Extra keyword arguments go
    straight to the SDK (e.g. ``connection_timeout``).
    """

    def __init__(self, compute_client: ComputeManagementClient, logger: Optional[logging.Logger] = None):
        self.compute_client = compute_client
        self.logger = logger or logging.getLogger(__name__)

    def list(self, resource_group: str, **kwargs: Any) -> List[VirtualMachineScaleSet]:
        return list(self.compute_client.virtual_machine_scale_sets.list(resource_group, **kwargs))

    def delete_and_wait(self, resource_group: str, name: str, **kwargs: Any) -> None:
        self.logger.info(f"🧹 Deleting scale set {name} in {resource_group}")
        poller = self.compute_client.virtual_machine_scale_sets.begin_delete(resource_group, name, **kwargs)
        poller.result()

    def create_or_update_and_wait(self, resource_group: str, name: str, body: VirtualMachineScaleSet, **kwargs: Any) -> None:
        self.logger.info(f"📋 Updating scale set {name} in {resource_group}")
        poller = self.compute_client.virtual_machine_scale_sets.begin_create_or_update(
            resource_group, name, body, **kwargs
        )
        poller.result()
