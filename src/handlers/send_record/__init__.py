"""Firehose Send Record Handler"""
from src.handlers.send_record.handler import RecordDeliveryError, main, run

__all__ = ["RecordDeliveryError", "main", "run"]
