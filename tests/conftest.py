"""Shared fixtures for aro_utils tests."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from azure.mgmt.compute.models import VirtualMachineScaleSetNetworkProfile


def make_scaleset(name, network_profile=None):
    """Build an object shaped like VirtualMachineScaleSet (name is read-only on the SDK model)."""
    return SimpleNamespace(
        name=name,
        virtual_machine_profile=SimpleNamespace(network_profile=network_profile),
    )


def make_gateway(name="gateway-vmss-redhat"):
    return make_scaleset(name, network_profile=VirtualMachineScaleSetNetworkProfile())


@pytest.fixture
def vmss_client():
    return MagicMock()
