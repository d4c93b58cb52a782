"""
Environment-driven configuration for the ARO deployment utilities
"""
import os
from dataclasses import dataclass, field
from typing import Callable, Optional
from urllib.parse import urlparse

# Gateway scale set reconciliation
GATEWAY_VMSS_PREFIX = os.getenv("GATEWAY_VMSS_PREFIX", "gateway-vmss-")
GATEWAY_HEALTH_PROBE_ID = os.getenv("GATEWAY_HEALTH_PROBE_ID") or None

# AppLens diagnostics service
APPLENS_ENDPOINT = os.getenv("APPLENS_ENDPOINT", "https://diag-runtimehost-prod.trafficmanager.net/api/invoke")


def default_scope(endpoint: str) -> str:
    """Build the AAD scope for an endpoint (scheme + host + /.default)"""
    parsed = urlparse(endpoint)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Cannot derive a token scope from endpoint: {endpoint!r}")
    return f"{parsed.scheme}://{parsed.netloc}/.default"


APPLENS_SCOPE = os.getenv("APPLENS_SCOPE") or None


@dataclass
class CleanerConfig:
    """Decision-time settings for the scale set cleaner"""
    gateway_name_prefix: str = GATEWAY_VMSS_PREFIX
    desired_health_probe_id: Optional[str] = GATEWAY_HEALTH_PROBE_ID
    gateway_predicate: Optional[Callable[[str], bool]] = field(default=None, repr=False)

    def is_gateway(self, name: Optional[str]) -> bool:
        if not name:
            return False
        if self.gateway_predicate is not None:
            return self.gateway_predicate(name)
        return name.startswith(self.gateway_name_prefix)

    @classmethod
    def from_env(cls) -> "CleanerConfig":
        """Re-read settings from the environment rather than import-time constants"""
        return cls(
            gateway_name_prefix=os.getenv("GATEWAY_VMSS_PREFIX", "gateway-vmss-"),
            desired_health_probe_id=os.getenv("GATEWAY_HEALTH_PROBE_ID") or None,
        )
