"""Output schemas for API commands, one module per domain."""

from . import config, link  # noqa: F401  (registers schemas)
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
