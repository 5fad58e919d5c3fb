"""
Wellness ROI - ROI Calculator
(total yearly cost - program cost) / program cost, rounded to whole
percentage points first and only then re-expressed for display.
"""
from engines.rounding import round_half_up, ratio_display


def compute_roi(total_yearly_cost, program_cost):
    """Returns (roiPoints, roi). Both are None when there is no cost basis."""
    if program_cost <= 0:
        return None, None
    points = round_half_up((total_yearly_cost - program_cost) / program_cost * 100)
    return points, ratio_display(points)
