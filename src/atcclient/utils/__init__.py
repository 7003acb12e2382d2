r"""Utility functions shared by the client modules."""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured"]

from atcclient.utils.structured_logging import StructuredFormatter, log_structured
