"""
Analysis Engine Service Implementation

Turns a price series into RSI, MACD, SMA and a composite trend call.
Stateless: every call rebuilds its arrays from the series it is given.
"""

import logging
from numbers import Real
from typing import Optional, Sequence

import numpy as np

from cryptopulse.schemas.analysis import AnalysisResult, MACDData, SMAData, TrendAnalysis
from cryptopulse.services.base import InsufficientDataError
from cryptopulse.services.analysis.interface import AnalysisServiceInterface
from cryptopulse.services.analysis.calculations import (
    sma,
    rsi,
    macd,
    get_last,
    round_half_up,
    round_or_none,
)
from cryptopulse.services.analysis.signals import SignalContext, score_signals

logger = logging.getLogger(__name__)

MIN_DATA_POINTS = 14

RSI_PERIOD = 14
MACD_FAST_PERIOD = 12
MACD_SLOW_PERIOD = 26
MACD_SIGNAL_PERIOD = 9
SMA_SHORT_PERIOD = 20
SMA_MEDIUM_PERIOD = 50
SMA_LONG_PERIOD = 200


def _to_array(prices: Sequence[float]) -> np.ndarray:
    """Copy prices into a float array; the caller's sequence is left untouched."""
    if not all(isinstance(p, Real) and not isinstance(p, bool) for p in prices):
        raise TypeError("Prices must be numbers")

    closes = np.array(prices, dtype=float)
    if not np.all(np.isfinite(closes)) or np.any(closes <= 0):
        raise ValueError("Prices must be positive finite numbers")
    return closes


class AnalysisService(AnalysisServiceInterface):
    """
    Analysis Engine Service.

    All calculations are deterministic and reproducible.
    """

    @property
    def name(self) -> str:
        return "AnalysisService"

    async def execute(self, input_data: Sequence[float]) -> AnalysisResult:
        """Analyze a price series."""
        return self.analyze(input_data)

    def analyze(self, prices: Sequence[float]) -> AnalysisResult:
        """Calculate all indicators and the trend for a price series."""
        if len(prices) < MIN_DATA_POINTS:
            raise InsufficientDataError(self.name, MIN_DATA_POINTS, len(prices))

        logger.debug(f"Analyzing {len(prices)} prices")

        rsi_val = self.calculate_rsi(prices)
        macd_data = self.calculate_macd(prices)
        sma_data = self.calculate_sma(prices)
        trend = self.analyze_trend(prices, rsi_val, macd_data)

        logger.debug(f"Trend {trend.direction.value} at strength {trend.strength}")

        return AnalysisResult(rsi=rsi_val, macd=macd_data, sma=sma_data, trend=trend)

    def calculate_rsi(self, prices: Sequence[float], period: int = RSI_PERIOD) -> Optional[float]:
        """Most recent RSI, or None with fewer than period + 1 prices."""
        closes = _to_array(prices)
        return round_or_none(get_last(rsi(closes, period)))

    def calculate_macd(self, prices: Sequence[float]) -> MACDData:
        """Most recent MACD triple; all None until the signal line is defined."""
        closes = _to_array(prices)
        macd_line, signal_line, histogram = macd(
            closes, MACD_FAST_PERIOD, MACD_SLOW_PERIOD, MACD_SIGNAL_PERIOD
        )

        macd_val = get_last(macd_line)
        signal_val = get_last(signal_line)
        if macd_val is None or signal_val is None:
            return MACDData()

        return MACDData(
            macd_line=round_half_up(macd_val),
            signal_line=round_half_up(signal_val),
            histogram=round_half_up(get_last(histogram)),
        )

    def calculate_sma(self, prices: Sequence[float]) -> SMAData:
        """20 / 50 / 200 SMAs, each None when the series is shorter than its window."""
        closes = _to_array(prices)
        return SMAData(
            short=round_or_none(get_last(sma(closes, SMA_SHORT_PERIOD))),
            medium=round_or_none(get_last(sma(closes, SMA_MEDIUM_PERIOD))),
            long=round_or_none(get_last(sma(closes, SMA_LONG_PERIOD))),
        )

    def analyze_trend(
        self, prices: Sequence[float], rsi: Optional[float], macd: MACDData
    ) -> TrendAnalysis:
        """
        Score the RSI zone, MACD cross, MA alignment and 5-point price change.

        SMAs are recomputed here through calculate_sma so this method depends
        only on the series and the RSI / MACD results.
        """
        ctx = SignalContext(
            closes=_to_array(prices),
            rsi=rsi,
            macd=macd,
            sma=self.calculate_sma(prices),
        )
        return score_signals(ctx)

    async def health_check(self) -> bool:
        """Analysis service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create analysis service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AnalysisService()
    return _service_instance


def analyze(prices: Sequence[float]) -> AnalysisResult:
    """Analyze a price series with the shared service instance."""
    return get_analysis_service().analyze(prices)
