"""Record Use Cases"""
from .send_record import SendRecordInput, SendRecordUseCase, send_record

__all__ = [
    "SendRecordInput",
    "SendRecordUseCase",
    "send_record",
]
