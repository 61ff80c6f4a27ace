"""Application Ports (Interfaces)"""
from .action_context import IActionContext, LogLevel, MissingRequiredInputError
from .delivery_stream import IDeliveryStreamGateway, RemoteSubmissionError

__all__ = [
    "IActionContext",
    "LogLevel",
    "MissingRequiredInputError",
    "IDeliveryStreamGateway",
    "RemoteSubmissionError",
]
