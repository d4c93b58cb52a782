"""
Response envelopes for AppLens detector queries

AppLens returns bare detector documents. These helpers wrap them in the ARM
resource shape ``{id, name, type, location, properties}`` served to callers.
"""
import json
import posixpath
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

DETECTOR_TYPE = "Microsoft.RedHatOpenShift/openShiftClusters/detectors"


@dataclass
class ResponseMessageEnvelope:
    id: str = ""
    name: str = ""
    type: str = ""
    location: str = ""
    properties: Any = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, omitting empty fields"""
        result = {}
        for key in ("id", "name", "type", "location"):
            value = getattr(self, key)
            if value:
                result[key] = value
        if self.properties is not None:
            result["properties"] = self.properties
        return result


@dataclass
class ResponseMessageCollectionEnvelope:
    value: List[ResponseMessageEnvelope] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        if not self.value:
            return {}
        return {"value": [envelope.to_dict() for envelope in self.value]}


def detector_resource_id(resource_id: str, detector_id: str) -> str:
    """Join and clean the path; a leading slash on a later part does not reset it"""
    joined = posixpath.normpath("/".join(part for part in (resource_id, "detectors", detector_id) if part))
    if joined.startswith("//"):
        joined = "/" + joined.lstrip("/")
    return joined


def get_detector_id(detector: Any) -> str:
    """Return ``metadata.id`` of a detector document, or "" when absent"""
    if not isinstance(detector, dict):
        return ""
    metadata = detector.get("metadata")
    if not isinstance(metadata, dict):
        return ""
    detector_id = metadata.get("id")
    if isinstance(detector_id, str):
        return detector_id
    return ""


def new_response_message_collection_envelope(
    body: Union[bytes, str],
    resource_id: str,
    location: Optional[str] = None
) -> ResponseMessageCollectionEnvelope:
    """
    Wrap a JSON array of detector documents.

    Entries without a string ``metadata.id`` are dropped.

    Raises:
        json.JSONDecodeError: body is not valid JSON
        ValueError: body is valid JSON but neither an array nor null
    """
    results = json.loads(body)
    if results is None:
        results = []
    if not isinstance(results, list):
        raise ValueError(f"Expected a JSON array of detectors, got {type(results).__name__}")

    collection = ResponseMessageCollectionEnvelope()
    for detector in results:
        detector_id = get_detector_id(detector)
        if not detector_id:
            continue
        collection.value.append(ResponseMessageEnvelope(
            id=detector_resource_id(resource_id, detector_id),
            name=detector_id,
            type=DETECTOR_TYPE,
            location=location or "",
            properties=detector,
        ))

    return collection


def new_response_message_envelope(
    resource_id: str,
    name: str,
    location: Optional[str],
    body: Union[bytes, str]
) -> ResponseMessageEnvelope:
    """Wrap a single detector response; malformed JSON raises json.JSONDecodeError"""
    properties = json.loads(body)

    return ResponseMessageEnvelope(
        id=detector_resource_id(resource_id, name),
        name=name,
        type=DETECTOR_TYPE,
        location=location or "",
        properties=properties,
    )
