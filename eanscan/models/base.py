"""
Common base model for pipeline values.
"""

from pydantic import BaseModel, ConfigDict


class ScanBaseModel(BaseModel):
    """Base model for values produced by a decode attempt. Instances are immutable."""

    model_config = ConfigDict(frozen=True)
