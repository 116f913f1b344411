"""
Analysis Engine Service

CONTRACT:
    Input:  price series (oldest first, at least 14 points)
    Output: AnalysisResult

RESPONSIBILITIES:
    - Calculate RSI (14), MACD (12/26/9) and SMA (20/50/200)
    - Score RSI zone, MACD cross, MA alignment and recent price change
    - Classify the trend as bullish / bearish / neutral with a strength

Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from cryptopulse.services.analysis.interface import AnalysisServiceInterface
from cryptopulse.services.analysis.service import (
    AnalysisService,
    analyze,
    get_analysis_service,
)

__all__ = [
    "AnalysisServiceInterface",
    "AnalysisService",
    "analyze",
    "get_analysis_service",
]
