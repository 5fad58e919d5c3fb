"""
Wellness ROI - Calculation Engine
Runs the full pipeline over one immutable input snapshot:

  validate -> population -> assumptions -> costs -> aggregate -> ROI

Every call recomputes from scratch; nothing is cached between calls.
Incomplete inputs give a result whose derived fields are all None.
"""
import logging

from engines.inputs import is_complete
from engines.population import estimate_transition_population
from engines.assumptions import derive_assumptions
from engines.costs import compute_sick_day_cost, compute_replacement_cost
from engines.aggregate import compute_total_yearly_cost, compute_program_cost
from engines.roi import compute_roi

logger = logging.getLogger(__name__)

RESULT_FIELDS = (
    'transitionPopulation', 'sickDayCost', 'replacementCost',
    'replacementCostBreakdown', 'totalYearlyCost', 'programCost',
    'totalCostSavings', 'roiPoints', 'roi',
)


def undefined_result():
    result = {k: None for k in RESULT_FIELDS}
    result['complete'] = False
    return result


def run_pipeline(inputs, policy):
    """Stages 2-6 for complete inputs. Returns (assumptions, result)."""
    population = estimate_transition_population(
        inputs.num_employees, inputs.percent_female, inputs.percent_female_over40)
    assumptions = derive_assumptions(population, inputs.avg_salary, inputs.avg_sick_leave)

    sick_day_cost = compute_sick_day_cost(assumptions, population, policy)
    replacement = compute_replacement_cost(assumptions, inputs.avg_salary, policy)

    total_yearly_cost = compute_total_yearly_cost(sick_day_cost, replacement['total'])
    program_cost = compute_program_cost(population, policy)
    roi_points, roi = compute_roi(total_yearly_cost, program_cost)

    result = {
        'complete': True,
        'transitionPopulation': population,
        'sickDayCost': sick_day_cost,
        'replacementCost': replacement['total'],
        'replacementCostBreakdown': {
            'partTime': replacement['partTime'],
            'resignation': replacement['resignation'],
            'jobChange': replacement['jobChange'],
        },
        'totalYearlyCost': total_yearly_cost,
        'programCost': program_cost,
        'totalCostSavings': total_yearly_cost - program_cost,
        'roiPoints': roi_points,
        'roi': roi,
    }
    return assumptions, result


def compute(inputs, policy):
    """Result for one snapshot of raw inputs under ``policy``."""
    if not is_complete(inputs):
        logger.debug("Inputs incomplete, result undefined: %s", inputs)
        return undefined_result()
    _, result = run_pipeline(inputs, policy)
    logger.debug("Computed ROI %s for population %s", result['roi'], result['transitionPopulation'])
    return result


def compute_with_assumptions(inputs, policy):
    """Like compute(), also returning the derived assumptions (None when incomplete)."""
    if not is_complete(inputs):
        return None, undefined_result()
    return run_pipeline(inputs, policy)
