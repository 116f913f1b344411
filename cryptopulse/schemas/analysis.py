"""
CONTRACT: Analysis Engine

Input: ordered price series (oldest first)
Output: AnalysisResult

Every numeric field is rounded to 2 decimals. None marks an indicator whose
window the series does not reach.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class TrendDirection(str, Enum):
    BULLISH = "bullish"
    BEARISH = "bearish"
    NEUTRAL = "neutral"


# =============================================================================
# INPUT: AnalyzeRequest
# =============================================================================


class AnalyzeRequest(BaseModel):
    """
    Request body for the analyze endpoint.
    Sent by: dashboard / price relay
    Received by: Analysis Service
    """

    prices: list[float] = Field(
        ..., description="Closing prices in chronological order (oldest first)"
    )


# =============================================================================
# OUTPUT: Indicator Components
# =============================================================================


class MACDData(BaseModel):
    """MACD indicator values. All present or all None."""

    macd_line: Optional[float] = None
    signal_line: Optional[float] = None
    histogram: Optional[float] = None

    @model_validator(mode="after")
    def _all_or_nothing(self) -> "MACDData":
        present = [
            v is not None for v in (self.macd_line, self.signal_line, self.histogram)
        ]
        if any(present) and not all(present):
            raise ValueError("MACD fields must be all present or all None")
        return self

    @property
    def is_available(self) -> bool:
        return self.macd_line is not None


class SMAData(BaseModel):
    """Simple moving averages over 20 / 50 / 200 points."""

    short: Optional[float] = Field(default=None, description="20-period SMA")
    medium: Optional[float] = Field(default=None, description="50-period SMA")
    long: Optional[float] = Field(default=None, description="200-period SMA")


class TrendAnalysis(BaseModel):
    """Composite directional call."""

    direction: TrendDirection
    strength: float = Field(..., ge=0, le=100, description="Share of bullish signal weight")
    description: str = Field(..., description="Signal phrases joined with '. '")


# =============================================================================
# OUTPUT: AnalysisResult (Complete Response)
# =============================================================================


class AnalysisResult(BaseModel):
    """
    Complete technical analysis of a price series.
    Returned by: Analysis Service
    Consumed by: dashboard (display only)
    """

    rsi: Optional[float] = Field(default=None, ge=0, le=100)
    macd: MACDData
    sma: SMAData
    trend: TrendAnalysis

    class Config:
        json_schema_extra = {
            "example": {
                "rsi": 62.5,
                "macd": {"macd_line": 1.42, "signal_line": 0.98, "histogram": 0.44},
                "sma": {"short": 2448.0, "medium": 2391.75, "long": None},
                "trend": {
                    "direction": "bullish",
                    "strength": 83.33,
                    "description": "RSI showing upward momentum. MACD above signal line. "
                    "Price up 1.26% in last 5 days",
                },
            }
        }
