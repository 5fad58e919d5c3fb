"""
Wellness ROI - Population Estimator
Number of employees undergoing the menopause transition.
"""
from engines.rounding import round_up


def estimate_transition_population(num_employees, percent_female, percent_female_over40):
    return round_up(num_employees * (percent_female / 100) * (percent_female_over40 / 100))
