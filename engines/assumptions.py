"""
Wellness ROI - Assumption Deriver
Per-computation assumptions derived from the raw inputs:

  units:               batches of 25 affected employees (replacement-cost scale)
  salaryPerWorkingDay: monthly salary annualised over a 220 working-day year
  avgSickDaysWithoutVSM / avgSickDaysWithVSM:
                       untreated baseline back-solved from the observed average,
                       then projected with symptoms. Left unrounded.
"""
from engines.rounding import round_up

COHORT_SIZE = 25
WORKING_DAYS_PER_YEAR = 220

# Epidemiological weighting: share with symptoms, sick-day multiplier, share without
SYMPTOMATIC_SHARE = 0.44
SYMPTOM_SICK_DAY_FACTOR = 1.57
ASYMPTOMATIC_SHARE = 0.66


def derive_assumptions(transition_population, avg_salary, avg_sick_leave):
    without_vsm = avg_sick_leave / (SYMPTOMATIC_SHARE * SYMPTOM_SICK_DAY_FACTOR + ASYMPTOMATIC_SHARE)
    return {
        'numWomenEnteringMenopauseUnits': round_up(transition_population / COHORT_SIZE),
        'salaryPerWorkingDay': round_up((avg_salary * 12) / WORKING_DAYS_PER_YEAR),
        'avgSickDaysWithoutVSM': without_vsm,
        'avgSickDaysWithVSM': without_vsm * SYMPTOM_SICK_DAY_FACTOR,
    }
