"""Tests for single-symbol analysis."""

import pytest

from tickerlens.exceptions import InsufficientDataError, MarketDataError
from tickerlens.models import Signal
from tickerlens.providers import InMemoryMarketData
from tickerlens.scoring.analysis import analyze_symbol

from conftest import AS_OF, make_quote, uptrend_then_pullback


class TestAnalyzeSymbol:

    def test_full_analysis(self, provider_factory):
        provider = provider_factory({"UPTR": uptrend_then_pullback()})

        analysis = analyze_symbol("uptr", provider, as_of=AS_OF)

        assert analysis.symbol == "UPTR"
        assert analysis.data_points == 60
        assert analysis.snapshot.price == 176.0
        assert analysis.snapshot.sma == pytest.approx(166.06)
        assert analysis.snapshot.rsi == pytest.approx(41.666, abs=0.01)
        assert analysis.recommendation.signal is Signal.BUY
        assert analysis.recommendation.score == 60

    def test_health_is_bounded(self, provider_factory):
        provider = provider_factory({"UPTR": uptrend_then_pullback()})

        health = analyze_symbol("UPTR", provider, as_of=AS_OF).health

        # 176 against a 206 high is a ~14.6% drawdown
        assert health.drawdown_exposure == pytest.approx(100 - 14.563 * 2.5, abs=0.01)
        # 1M shares traded against a 5B market cap
        assert health.liquidity == pytest.approx(4.0)

    def test_analyzes_short_history_without_skipping(self, provider_factory):
        provider = provider_factory({"NEW": [10.0, 11.0, 12.0]})

        analysis = analyze_symbol("NEW", provider, as_of=AS_OF)

        assert analysis.data_points == 3
        assert analysis.snapshot.sma is None
        assert analysis.recommendation.score == 40
        assert analysis.recommendation.signal is Signal.SELL

    def test_no_history_raises(self):
        provider = InMemoryMarketData(quotes={"ABC": make_quote("ABC", [10.0])})

        with pytest.raises(InsufficientDataError, match="ABC"):
            analyze_symbol("ABC", provider, as_of=AS_OF)

    def test_unknown_symbol_raises(self):
        with pytest.raises(MarketDataError):
            analyze_symbol("NOPE", InMemoryMarketData(), as_of=AS_OF)
