"""Object-store change event models"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Dict, List
from urllib.parse import unquote_plus


class EventName(str, Enum):
    """Change event names understood by the indexing pipeline"""
    OBJECT_CREATED = "OBJECT_CREATED"
    OBJECT_REMOVED = "OBJECT_REMOVED"


# S3 notification name prefixes mapped to core event names
S3_EVENT_PREFIXES = {
    "ObjectCreated:": EventName.OBJECT_CREATED,
    "ObjectRemoved:": EventName.OBJECT_REMOVED,
}


class S3Bucket(BaseModel):
    name: str


class S3Object(BaseModel):
    key: str


class S3Entity(BaseModel):
    bucket: S3Bucket
    object: S3Object


class S3Record(BaseModel):
    """One entry of an S3 notification's ``Records`` list"""
    eventName: str
    s3: S3Entity


class S3Notification(BaseModel):
    """S3 notification payload"""
    Records: List[S3Record]


class ChangeEvent(BaseModel):
    """A single object-store notification"""
    event_name: str
    bucket: str
    key: str

    @classmethod
    def from_s3_record(cls, record: Dict[str, Any]) -> "ChangeEvent":
        """
        Convert an S3 notification record into a change event
        
        Unknown event names are kept verbatim so the pipeline can reject them.
        Object keys arrive URL-encoded and are decoded here.
        
        Raises:
            ValidationError: If the record is not shaped like an S3 record
        """
        return cls.from_s3(S3Record.model_validate(record))

    @classmethod
    def from_s3(cls, record: S3Record) -> "ChangeEvent":
        event_name = record.eventName
        for prefix, name in S3_EVENT_PREFIXES.items():
            if record.eventName.startswith(prefix):
                event_name = name.value
                break

        return cls(
            event_name=event_name,
            bucket=record.s3.bucket.name,
            key=unquote_plus(record.s3.object.key),
        )


class EventBatch(BaseModel):
    """A batch of change events delivered together"""
    events: List[ChangeEvent] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "EventBatch":
        """
        Accept either the core ``events`` shape or the S3 ``Records`` shape
        
        Raises:
            ValidationError: If the payload matches neither shape
        """
        if "Records" in payload:
            notification = S3Notification.model_validate(payload)
            return cls(events=[ChangeEvent.from_s3(r) for r in notification.Records])
        return cls.model_validate(payload)
