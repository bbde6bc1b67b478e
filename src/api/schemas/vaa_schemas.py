# This file defines the response schema for the VAA count histogram.
# Rows keep MongoDB's `$bucket` shape: the bucket boundary (or "unknown") under `_id`.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VaaCountBucket(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bucket: str = Field(alias="_id")
    count: int = Field(ge=0)
