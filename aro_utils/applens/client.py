"""
AppLens client

Thin azure-core pipeline client for the AppLens diagnostics service. Responses
are reshaped into ARM-style detector envelopes; see models.py.
"""
import logging
from typing import Any, Optional

from azure.core import PipelineClient
from azure.core.pipeline.policies import (
    BearerTokenCredentialPolicy,
    HeadersPolicy,
    NetworkTraceLoggingPolicy,
    RetryPolicy,
    UserAgentPolicy,
)
from azure.core.rest import HttpRequest, HttpResponse
from azure.identity import DefaultAzureCredential

from ..config import APPLENS_ENDPOINT, APPLENS_SCOPE, default_scope
from .exceptions import AppLensError
from .models import (
    ResponseMessageCollectionEnvelope,
    ResponseMessageEnvelope,
    new_response_message_collection_envelope,
    new_response_message_envelope,
)
from .options import GetDetectorOptions, ListDetectorsOptions

SDK_MONIKER = "aro-utils-applens/0.1.0"


class AppLensClient:
    """Client for querying AppLens detectors"""

    def __init__(self, endpoint: str, credential=None, scope: Optional[str] = None, **kwargs: Any):
        self.endpoint = endpoint
        self.logger = kwargs.pop("logger", None) or logging.getLogger(__name__)

        policies = [
            HeadersPolicy(**kwargs),
            UserAgentPolicy(sdk_moniker=SDK_MONIKER, **kwargs),
            RetryPolicy(**kwargs),
        ]
        if credential is not None:
            policies.append(BearerTokenCredentialPolicy(credential, scope or default_scope(endpoint), **kwargs))
        policies.append(NetworkTraceLoggingPolicy(**kwargs))

        self._client = PipelineClient(base_url=endpoint, policies=policies, **kwargs)

    def list_detectors(self, options: Optional[ListDetectorsOptions] = None, **kwargs: Any) -> ResponseMessageCollectionEnvelope:
        """
        List the detectors AppLens exposes for a cluster.

        Args:
            options: Target resource and location

        Returns:
            ResponseMessageCollectionEnvelope with one entry per identified detector
        """
        options = options or ListDetectorsOptions()
        response = self._send_post_request(options, **kwargs)
        return new_response_message_collection_envelope(response.content, options.resource_id, options.location)

    def get_detector(self, options: Optional[GetDetectorOptions] = None, **kwargs: Any) -> ResponseMessageEnvelope:
        """Run a single detector and wrap its result"""
        options = options or GetDetectorOptions()
        response = self._send_post_request(options, **kwargs)
        return new_response_message_envelope(options.resource_id, options.detector_id, options.location, response.content)

    def _send_post_request(self, options, **kwargs: Any) -> HttpResponse:
        request = HttpRequest("POST", self.endpoint, headers=options.to_headers())
        self.logger.debug(f"AppLens POST {request.headers.get('x-ms-path-query')}")
        return self._execute_and_ensure_success_response(request, **kwargs)

    def _execute_and_ensure_success_response(self, request: HttpRequest, **kwargs: Any) -> HttpResponse:
        response = self._client.send_request(request, **kwargs)

        if 200 <= response.status_code < 300 or response.status_code == 304:
            return response

        self.logger.warning(f"AppLens returned status {response.status_code}")
        raise AppLensError(response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "AppLensClient":
        self._client.__enter__()
        return self

    def __exit__(self, *exc_details: Any) -> None:
        self._client.__exit__(*exc_details)


def get_applens_client(endpoint: Optional[str] = None, scope: Optional[str] = None, **kwargs: Any) -> AppLensClient:
    """Get authenticated AppLens client using managed identity"""
    endpoint = endpoint or APPLENS_ENDPOINT
    if scope is None:
        scope = APPLENS_SCOPE or default_scope(endpoint)
    credential = DefaultAzureCredential()
    return AppLensClient(endpoint, credential=credential, scope=scope, **kwargs)
