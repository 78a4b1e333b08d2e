"""Report line formatting."""

from sub_pilot.state import Report

REPORT_TEMPLATE = "Distance is {distance}, depth is {depth}, product is {product}"


def format_report(report: Report) -> str:
    """Render ``report`` as ``Distance is X, depth is Y, product is P``."""
    return REPORT_TEMPLATE.format(
        distance=report.distance, depth=report.depth, product=report.product
    )
