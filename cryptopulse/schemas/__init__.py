"""
CryptoPulse Schema Contracts

JSON contracts between the analysis engine and its callers.
"""

from cryptopulse.schemas.analysis import (
    AnalyzeRequest,
    AnalysisResult,
    MACDData,
    SMAData,
    TrendAnalysis,
    TrendDirection,
)

__all__ = [
    "AnalyzeRequest",
    "AnalysisResult",
    "MACDData",
    "SMAData",
    "TrendAnalysis",
    "TrendDirection",
]
