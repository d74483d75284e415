#!/usr/bin/env python3
"""
Quick Start Guide for the Tank Calibration Engine

Shows the most common workflow: load a dip chart, build a strapping
chart, and validate the chart against field checks and deliveries.

Usage:
    python examples/quick_start.py
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tank_calibration import (  # noqa: E402
    CalibrationDataError,
    DeliveryReading,
    generate_strapping_chart,
    process_chart_text,
    process_delivery_readings,
    process_validation_text,
)

CHART = """[FUSION_ATG_TANK_TABLE]
Level   Volume
0       0
250     1580
500     4300
1000    11200
1500    18100
2000    22300
"""

FIELD_CHECKS = """Dip(mm),Field Volume(L)
300,2150
800,8700
1800,21500
"""


def main():
    print("=" * 60)
    print("  Tank Calibration Engine - Quick Start Guide")
    print("=" * 60)

    # =========================================================================
    # Example 1: Load a calibration chart
    # =========================================================================
    print("\n1. LOAD CALIBRATION CHART")
    print("-" * 40)

    analysis = process_chart_text(CHART)
    curve = analysis.curve
    print(f"Dialect: {analysis.dialect.value}, points: {len(curve)}")
    print(f"Headers: {analysis.mapping.height_header} / {analysis.mapping.volume_header}")

    # =========================================================================
    # Example 2: Strapping chart
    # =========================================================================
    print("\n2. STRAPPING CHART")
    print("-" * 40)

    places = analysis.report_config.decimal_places
    for point in generate_strapping_chart(curve, points=9):
        print(f"  {point.height:8.{places}f} mm  {point.chart_volume:10.{places}f} L")

    # =========================================================================
    # Example 3: Point validation from a field check file
    # =========================================================================
    print("\n3. POINT VALIDATION")
    print("-" * 40)

    result = process_validation_text(FIELD_CHECKS, curve)
    for record in result.records:
        print(
            f"  {record.height:6.0f} mm  chart {record.chart_volume:9.1f}  "
            f"field {record.field_volume:9.1f}  deviation {record.deviation:+7.1f}"
        )
    print(f"  {result.stats.summary()}")

    # =========================================================================
    # Example 4: Manually entered delivery readings
    # =========================================================================
    print("\n4. DELIVERY VALIDATION")
    print("-" * 40)

    readings = [
        DeliveryReading(height=400, delivery=0),
        DeliveryReading(height=900, delivery=6400),
        DeliveryReading(height=1400, delivery=7000),
    ]
    deliveries = process_delivery_readings(readings, curve)
    for record in deliveries.records:
        print(
            f"  {record.height_before:6.0f} -> {record.height_after:6.0f} mm  "
            f"reported {record.reported_delivery:7.0f}  "
            f"chart {record.chart_calculated_delivery:9.1f}  "
            f"deviation {record.deviation:+7.1f}"
        )

    # =========================================================================
    # Example 5: Error handling
    # =========================================================================
    print("\n5. ERROR HANDLING")
    print("-" * 40)

    try:
        process_chart_text("Temperature,Pressure\n20,1.0")
    except CalibrationDataError as e:
        print(f"  {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
