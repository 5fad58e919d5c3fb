import itertools

import pytest

from engines.aggregate import compute_program_cost, compute_total_yearly_cost
from engines.assumptions import derive_assumptions
from engines.costs import compute_replacement_cost, compute_sick_day_cost
from engines.policy import PolicyConstants
from engines.population import estimate_transition_population
from engines.roi import compute_roi

POLICY = PolicyConstants()


# ── Population ──

@pytest.mark.parametrize("args,expected", [
    ((500, 50, 40), 100),
    ((10, 50, 50), 3),
    ((1, 1, 1), 1),
    ((0, 50, 40), 0),
    ((500, 0, 40), 0),
    ((500, 100, 100), 500),
])
def test_transition_population(args, expected):
    assert estimate_transition_population(*args) == expected


def test_transition_population_monotonic():
    grid = [0, 1, 7, 33, 50, 99, 100]
    employees = [0, 1, 13, 250, 1000]
    for n, pf, po in itertools.product(employees, grid, grid):
        base = estimate_transition_population(n, pf, po)
        assert base >= 0
        assert estimate_transition_population(n + 1, pf, po) >= base
        assert estimate_transition_population(n, min(pf + 1, 100), po) >= base
        assert estimate_transition_population(n, pf, min(po + 1, 100)) >= base


# ── Assumptions ──

def test_derive_assumptions_canonical():
    a = derive_assumptions(100, 3750, 25)
    assert a['numWomenEnteringMenopauseUnits'] == 4
    assert a['salaryPerWorkingDay'] == 205
    assert a['avgSickDaysWithoutVSM'] == pytest.approx(25 / 1.3508)
    assert a['avgSickDaysWithVSM'] == pytest.approx(25 / 1.3508 * 1.57)


def test_units_round_up_per_batch_of_25():
    assert derive_assumptions(101, 3750, 25)['numWomenEnteringMenopauseUnits'] == 5
    assert derive_assumptions(1, 3750, 25)['numWomenEnteringMenopauseUnits'] == 1
    assert derive_assumptions(0, 3750, 25)['numWomenEnteringMenopauseUnits'] == 0


def test_sick_day_baselines_not_rounded():
    a = derive_assumptions(100, 3750, 25)
    assert a['avgSickDaysWithoutVSM'] != int(a['avgSickDaysWithoutVSM'])


# ── Costs ──

def test_sick_day_cost_canonical():
    a = derive_assumptions(100, 3750, 25)
    assert compute_sick_day_cost(a, 100, POLICY) == 64879


def test_sick_day_cost_zero_without_sick_leave():
    a = derive_assumptions(100, 3750, 0)
    assert compute_sick_day_cost(a, 100, POLICY) == 0


def test_replacement_cost_canonical():
    a = derive_assumptions(100, 3750, 25)
    cost = compute_replacement_cost(a, 3750, POLICY)
    assert cost == {'partTime': 5400, 'resignation': 9000, 'jobChange': 16200, 'total': 30600}


@pytest.mark.parametrize("population,salary", [(7, 2890.5), (33, 4100), (101, 3333.33), (1, 1)])
def test_replacement_total_is_sum_of_rounded_terms(population, salary):
    a = derive_assumptions(population, salary, 25)
    cost = compute_replacement_cost(a, salary, POLICY)
    assert cost['total'] == cost['partTime'] + cost['resignation'] + cost['jobChange']
    assert all(isinstance(cost[k], int) for k in cost)


def test_replacement_cost_ignores_upper_band():
    a = derive_assumptions(100, 3750, 25)
    wide = PolicyConstants(replacement_cost_higher=10)
    assert compute_replacement_cost(a, 3750, wide) == compute_replacement_cost(a, 3750, POLICY)


# ── Aggregate & ROI ──

def test_totals_canonical():
    assert compute_total_yearly_cost(64879, 30600) == 95479
    assert compute_program_cost(100, POLICY) == 11880
    assert compute_program_cost(0, POLICY) == 0


def test_roi_canonical():
    points, roi = compute_roi(95479, 11880)
    assert points == 704
    assert str(roi) == "7.0"


def test_roi_whole_ratio_is_int():
    assert compute_roi(200, 100) == (100, 1)
    assert compute_roi(0, 100) == (-100, -1)


def test_roi_negative_fraction():
    points, roi = compute_roi(50, 100)
    assert points == -50
    assert str(roi) == "-0.5"


@pytest.mark.parametrize("program_cost", [0, -1])
def test_roi_guard_without_cost_basis(program_cost):
    assert compute_roi(95479, program_cost) == (None, None)
