"""
Wellness ROI - Cost Calculators
Yearly cost of untreated symptoms: sick days, and replacement for
part-time reduction / resignation / job change.
"""
from engines.rounding import round_up


def compute_sick_day_cost(assumptions, transition_population, policy):
    difference = assumptions['avgSickDaysWithVSM'] - assumptions['avgSickDaysWithoutVSM']
    adjusted = difference * (policy.percent_sick_due_to_symptoms / 100)
    per_employee = adjusted * assumptions['salaryPerWorkingDay']
    return round_up(per_employee * transition_population)


def compute_replacement_cost(assumptions, avg_salary, policy):
    """Three replacement terms, each rounded up on its own before summing.

    Returns {'partTime', 'resignation', 'jobChange', 'total'}.
    """
    units = assumptions['numWomenEnteringMenopauseUnits']
    lower = policy.replacement_cost_lower

    part_time = round_up(
        units *
        (policy.part_time_percentage / 100) *
        (policy.reduction_assumption / 100) *
        avg_salary * 12 *
        lower
    )
    resignation = round_up(
        units *
        (policy.resigning_percentage / 100) *
        avg_salary * 12 *
        lower
    )
    job_change = round_up(
        units *
        (policy.job_change_percentage / 100) *
        avg_salary * 12 *
        lower
    )
    return {
        'partTime': part_time, 'resignation': resignation, 'jobChange': job_change,
        'total': part_time + resignation + job_change,
    }
