"""
Wellness ROI - Aggregator
Total yearly cost of untreated symptoms and yearly program cost.
"""
from engines.rounding import round_up


def compute_total_yearly_cost(sick_day_cost, replacement_cost):
    return round_up(sick_day_cost + replacement_cost)


def compute_program_cost(transition_population, policy):
    return round_up(policy.program_monthly_subscription * transition_population * 12)
