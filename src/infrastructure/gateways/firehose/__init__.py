"""Firehose Gateway implementations"""
from src.infrastructure.gateways.firehose.firehose_gateway import FirehoseGateway

__all__ = ["FirehoseGateway"]
