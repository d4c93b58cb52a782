"""
Request options for AppLens detector calls

AppLens is invoked with a POST to a single endpoint; the target resource path
and verb travel in ``x-ms-*`` headers.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Dict, Optional

HEADER_XMS_DATE = "x-ms-date"
HEADER_XMS_CLIENT_REQUEST_ID = "x-ms-client-request-id"
HEADER_XMS_REQUEST_ID = "x-ms-request-id"
HEADER_XMS_PATH_QUERY = "x-ms-path-query"
HEADER_XMS_VERB = "x-ms-verb"
HEADER_XMS_LOCATION = "x-ms-location"


def _common_headers(path_query: str, location: Optional[str]) -> Dict[str, str]:
    return {
        HEADER_XMS_PATH_QUERY: path_query,
        HEADER_XMS_CLIENT_REQUEST_ID: str(uuid.uuid4()),
        HEADER_XMS_REQUEST_ID: str(uuid.uuid4()),
        HEADER_XMS_DATE: format_datetime(datetime.now(timezone.utc), usegmt=True),
        HEADER_XMS_VERB: "POST",
        HEADER_XMS_LOCATION: location or "",
    }


@dataclass
class GetDetectorOptions:
    """Options for AppLensClient.get_detector"""
    resource_id: str = ""
    detector_id: str = ""
    location: Optional[str] = None

    def to_headers(self) -> Dict[str, str]:
        return _common_headers(f"{self.resource_id}/detectors/{self.detector_id}", self.location)


@dataclass
class ListDetectorsOptions:
    """Options for AppLensClient.list_detectors"""
    resource_id: str = ""
    location: Optional[str] = None

    def to_headers(self) -> Dict[str, str]:
        return _common_headers(f"{self.resource_id}/detectors", self.location)
