from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

VariantName = Literal["minimal", "english"]


class CoordinateModel(BaseModel):
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class ClickRequest(BaseModel):
    # No bounds here: clicks outside the board are ignored, not rejected.
    x: int
    y: int


class MoveRequest(BaseModel):
    start: CoordinateModel
    steps: list[CoordinateModel] = Field(
        ..., min_length=1, description="Ordered landing squares after the starting square."
    )


class VariantRequest(BaseModel):
    variant: VariantName


class ResetRequest(BaseModel):
    variant: Optional[VariantName] = None


class RulesRequest(BaseModel):
    chainCaptures: Optional[bool] = None
    forcedCapture: Optional[bool] = None
    blockedSideLoses: Optional[bool] = None
