"""
AppLens Module

Detector queries against the AppLens diagnostics service, reshaped into ARM envelopes.
"""

from .client import AppLensClient, get_applens_client
from .exceptions import AppLensError
from .models import (
    DETECTOR_TYPE,
    ResponseMessageCollectionEnvelope,
    ResponseMessageEnvelope,
    new_response_message_collection_envelope,
    new_response_message_envelope,
)
from .options import GetDetectorOptions, ListDetectorsOptions

__all__ = [
    'AppLensClient',
    'get_applens_client',
    'AppLensError',
    'DETECTOR_TYPE',
    'ResponseMessageCollectionEnvelope',
    'ResponseMessageEnvelope',
    'new_response_message_collection_envelope',
    'new_response_message_envelope',
    'GetDetectorOptions',
    'ListDetectorsOptions'
]
