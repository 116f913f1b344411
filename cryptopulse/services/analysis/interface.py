"""
Analysis Engine Service Interface

Defines the contract for the analysis layer.
"""

from abc import abstractmethod
from typing import Optional, Sequence

from cryptopulse.services.base import BaseService
from cryptopulse.schemas.analysis import AnalysisResult, MACDData, SMAData, TrendAnalysis


class AnalysisServiceInterface(BaseService[Sequence[float], AnalysisResult]):
    """
    Analysis Engine Service Contract.

    INPUT: Sequence[float]
        - Closing prices, oldest first, at least 14 points

    OUTPUT: AnalysisResult
        - rsi, macd, sma, trend
    """

    @property
    def name(self) -> str:
        return "AnalysisService"

    @abstractmethod
    def analyze(self, prices: Sequence[float]) -> AnalysisResult:
        """
        Run every indicator and the trend scorer over a price series.

        Raises:
            InsufficientDataError: fewer than 14 prices
        """
        pass

    @abstractmethod
    def calculate_rsi(self, prices: Sequence[float], period: int = 14) -> Optional[float]:
        pass

    @abstractmethod
    def calculate_macd(self, prices: Sequence[float]) -> MACDData:
        pass

    @abstractmethod
    def calculate_sma(self, prices: Sequence[float]) -> SMAData:
        pass

    @abstractmethod
    def analyze_trend(
        self, prices: Sequence[float], rsi: Optional[float], macd: MACDData
    ) -> TrendAnalysis:
        pass
