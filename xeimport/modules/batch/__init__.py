"""
Batch Module - Black Box Interface

Purpose: Validate an import request and run it across servers and templates
Interface: BatchDriver.run(), BatchDriver.iter_outcomes(), validate_request()
Hidden: Connection per server, iteration order, warning/exception policy

Failures are recovered per server and per template; a batch never stops early.
"""

from .driver import BatchDriver, ImportRequest, validate_request

__all__ = ["BatchDriver", "ImportRequest", "validate_request"]
