#!/usr/bin/env python3
"""
Basic Usage Example - DSFM Market Structure Analysis

This script demonstrates the basic usage of the market structure engine
with synthetic close prices. It shows how to:
- Derive log returns from close prices
- Build the correlation matrix and network
- Rank bridge instruments
- Simulate a shock and aggregate it by sector

Run: python examples/basic_usage.py
"""

import json
import math
from datetime import date, timedelta
from typing import Dict, List

from dsfm_app.analysis.insights import generate_insights
from dsfm_app.data.models import PricePoint
from dsfm_app.data.returns import build_return_series
from dsfm_app.engine import MarketStructureEngine
from dsfm_app.logging import configure_logging


def create_price_history(base: float, drivers: List[float], days: int = 60) -> List[PricePoint]:
    """Create a close price path moved by a weighted mix of market factors."""
    start = date(2024, 1, 1)
    prices = []
    close = base

    for day in range(days):
        factors = (math.sin(0.7 * day), math.cos(1.3 * day), math.sin(2.9 * day + 0.5))
        daily_return = 0.01 * sum(w * f for w, f in zip(drivers, factors))
        close *= math.exp(daily_return)
        prices.append(PricePoint(start + timedelta(days=day), round(close, 2)))

    return prices


def create_universe() -> Dict[str, List[PricePoint]]:
    """A handful of NSE symbols loading on three synthetic factors."""
    return {
        "RELIANCE.NS": create_price_history(2500.0, [1.0, 0.1, 0.0]),
        "ONGC.NS": create_price_history(180.0, [0.9, 0.0, 0.2]),
        "TCS.NS": create_price_history(3600.0, [0.1, 1.0, 0.0]),
        "INFY.NS": create_price_history(1500.0, [0.0, 0.9, 0.3]),
        "HDFCBANK.NS": create_price_history(1600.0, [0.6, 0.6, 0.1]),
        "SBIN.NS": create_price_history(600.0, [0.5, 0.4, 0.6]),
        "ITC.NS": create_price_history(450.0, [0.0, 0.1, 1.0]),
    }


def main():
    configure_logging(level="INFO")

    print("🚀 DSFM Market Structure Analysis - Basic Usage")
    print("=" * 50)

    engine = MarketStructureEngine()

    series = [build_return_series(symbol, prices) for symbol, prices in create_universe().items()]
    print(f"\n📈 Built return series for {len(series)} instruments")

    result = engine.analyze(series)

    print(f"\n🕸️  Network: {len(result.graph.nodes)} nodes, {len(result.graph.edges)} edges "
          f"(threshold {result.graph.threshold})")

    print("\n🔗 Top correlated pairs:")
    for pair in result.top_pairs[:5]:
        print(f"  {pair.symbol1:<12} {pair.symbol2:<12} {pair.correlation:+.3f}")

    print("\n🌉 Bridge instruments:")
    for node in result.bridges[:3]:
        print(f"  {node.label:<10} betweenness={node.betweenness:.3f} degree={node.degree}")

    shock_symbol = result.bridges[0].id
    simulation = engine.simulate(result, shock_symbol, 5.0)

    print(f"\n💥 5% shock in {shock_symbol}: {simulation.total_affected} instruments affected")
    for impact in simulation.impacts[:5]:
        print(f"  {impact.symbol:<12} impact={impact.impact:.2f}%")

    print("\n🏭 Affected sectors:")
    for sector in engine.affected_sectors(simulation):
        print(f"  {sector.sector:<10} total={sector.total_impact:.2f}% stocks={sector.stock_count}")

    print("\n💡 Insights:")
    for line in generate_insights(result.graph, result.matrix, simulation):
        print(f"  • {line}")

    print("\n📄 Validation report:")
    print(json.dumps(result.validation.to_dict(), indent=2))


if __name__ == "__main__":
    main()
