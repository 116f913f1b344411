"""
Trend Signal Evaluators

Each evaluator inspects one aspect of the series and returns a SignalResult,
or None when its inputs are unavailable. The trend scorer folds over
SIGNAL_EVALUATORS in order, so phrase order in the description is fixed.
"""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from cryptopulse.schemas.analysis import MACDData, SMAData, TrendAnalysis, TrendDirection
from cryptopulse.services.analysis.calculations import percent_change, round_half_up

RSI_OVERBOUGHT = 70
RSI_OVERSOLD = 30
RSI_MIDLINE = 50

PRICE_CHANGE_WINDOW = 5

BULLISH_THRESHOLD = 60
BEARISH_THRESHOLD = 40


@dataclass(frozen=True)
class SignalContext:
    """Inputs shared by all evaluators."""
    closes: np.ndarray
    rsi: Optional[float]
    macd: MACDData
    sma: SMAData


@dataclass(frozen=True)
class SignalResult:
    """Outcome of one evaluable signal."""
    contribution: float  # 0.0 - 1.0 bullish weight
    phrase: Optional[str] = None


SignalEvaluator = Callable[[SignalContext], Optional[SignalResult]]


def evaluate_rsi_zone(ctx: SignalContext) -> Optional[SignalResult]:
    """Overbought / oversold / upward momentum."""
    if ctx.rsi is None:
        return None

    if ctx.rsi > RSI_OVERBOUGHT:
        return SignalResult(0.0, "Overbought (RSI > 70)")
    if ctx.rsi < RSI_OVERSOLD:
        return SignalResult(1.0, "Oversold (RSI < 30)")
    if ctx.rsi > RSI_MIDLINE:
        return SignalResult(0.5, "RSI showing upward momentum")
    return SignalResult(0.0)


def evaluate_macd_cross(ctx: SignalContext) -> Optional[SignalResult]:
    """MACD line relative to its signal line."""
    if not ctx.macd.is_available:
        return None

    macd_line, signal_line = ctx.macd.macd_line, ctx.macd.signal_line

    if macd_line > signal_line:
        return SignalResult(1.0, "MACD above signal line")
    if macd_line < signal_line:
        return SignalResult(0.0, "MACD below signal line")
    return SignalResult(0.0)


def evaluate_ma_alignment(ctx: SignalContext) -> Optional[SignalResult]:
    """Ordering of the 20 / 50 / 200 SMAs."""
    short, medium, long = ctx.sma.short, ctx.sma.medium, ctx.sma.long
    if short is None or medium is None or long is None:
        return None

    if short > medium > long:
        return SignalResult(1.0, "Bullish MA alignment")
    if short < medium < long:
        return SignalResult(0.0, "Bearish MA alignment")
    return SignalResult(0.0)


def evaluate_price_change(ctx: SignalContext) -> Optional[SignalResult]:
    """Percent move across the last five points."""
    change = percent_change(ctx.closes, PRICE_CHANGE_WINDOW)
    if change is None:
        return None

    percent = round_half_up(abs(change))
    if change > 0:
        return SignalResult(1.0, f"Price up {percent:.2f}% in last 5 days")
    return SignalResult(0.0, f"Price down {percent:.2f}% in last 5 days")


SIGNAL_EVALUATORS: tuple[SignalEvaluator, ...] = (
    evaluate_rsi_zone,
    evaluate_macd_cross,
    evaluate_ma_alignment,
    evaluate_price_change,
)


def classify_strength(strength: float) -> TrendDirection:
    """Map a 0-100 strength to a direction. 40 and 60 are neutral."""
    if strength > BULLISH_THRESHOLD:
        return TrendDirection.BULLISH
    elif strength < BEARISH_THRESHOLD:
        return TrendDirection.BEARISH
    return TrendDirection.NEUTRAL


def score_signals(
    ctx: SignalContext,
    evaluators: tuple[SignalEvaluator, ...] = SIGNAL_EVALUATORS,
) -> TrendAnalysis:
    """Fold evaluator outcomes into a TrendAnalysis."""
    bullish_score = 0.0
    total_signals = 0
    phrases: list[str] = []

    for evaluate in evaluators:
        result = evaluate(ctx)
        if result is None:
            continue
        total_signals += 1
        bullish_score += result.contribution
        if result.phrase:
            phrases.append(result.phrase)

    strength = (bullish_score / total_signals) * 100 if total_signals > 0 else 0.0

    return TrendAnalysis(
        direction=classify_strength(strength),
        strength=round_half_up(strength),
        description=". ".join(phrases),
    )
