"""Record Domain Module"""
from .result import Err, ErrorKind, Ok, Result
from .validation import (
    MAX_RECORD_SIZE_BYTES,
    MAX_STREAM_NAME_LENGTH,
    payload_bytes,
    validate_data,
    validate_stream_name,
)
from .value_objects import SubmissionRequest, SubmissionResult

__all__ = [
    "Err",
    "ErrorKind",
    "Ok",
    "Result",
    "MAX_RECORD_SIZE_BYTES",
    "MAX_STREAM_NAME_LENGTH",
    "payload_bytes",
    "validate_data",
    "validate_stream_name",
    "SubmissionRequest",
    "SubmissionResult",
]
