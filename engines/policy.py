"""
Wellness ROI - Policy Constants
Fixed, process-wide assumptions behind every estimate. Defaults are built in;
a scenario workbook (data/config/policy.xlsx) may replace them wholesale.
"""
import os, math, logging
from dataclasses import dataclass, asdict, replace
import openpyxl

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'data')
POLICY_PATH_ENV = 'WELLNESS_ROI_POLICY'
# Keeps every derived product finite for inputs within engines.inputs.MAX_VALUES
MAX_POLICY_VALUE = 1e6


class PolicyError(ValueError):
    """A policy value could not be read or is not numeric."""


@dataclass(frozen=True)
class PolicyConstants:
    percent_severe_symptoms: float = 75
    avg_transition_years: float = 8.5
    resigning_percentage: float = 10
    part_time_percentage: float = 24
    reduction_assumption: float = 25
    job_change_percentage: float = 18
    replacement_cost_lower: float = 0.5
    # Upper bound of the replacement-cost band; not used by any formula yet.
    replacement_cost_higher: float = 2
    percent_sick_due_to_symptoms: float = 30
    program_monthly_subscription: float = 9.9
    avg_sick_days: float = 25

    def to_dict(self):
        values = asdict(self)
        return {key: values[attr] for key, attr in API_KEYS.items()}


# camelCase key used by the JSON API -> dataclass attribute
API_KEYS = {
    'percentSevereSymptoms': 'percent_severe_symptoms',
    'avgTransitionYears': 'avg_transition_years',
    'resigningPercentage': 'resigning_percentage',
    'partTimePercentage': 'part_time_percentage',
    'reductionAssumption': 'reduction_assumption',
    'jobChangePercentage': 'job_change_percentage',
    'replacementCostLower': 'replacement_cost_lower',
    'replacementCostHigher': 'replacement_cost_higher',
    'percentSickDueToSymptoms': 'percent_sick_due_to_symptoms',
    'programMonthlySubscription': 'program_monthly_subscription',
    'avgSickDays': 'avg_sick_days',
}

# Workbook 'Parameter' label -> dataclass attribute
WORKBOOK_LABELS = {
    'Percent Severe Symptoms': 'percent_severe_symptoms',
    'Avg Transition Years': 'avg_transition_years',
    'Resigning %': 'resigning_percentage',
    'Part Time %': 'part_time_percentage',
    'Reduction Assumption %': 'reduction_assumption',
    'Job Change %': 'job_change_percentage',
    'Replacement Cost Lower': 'replacement_cost_lower',
    'Replacement Cost Higher': 'replacement_cost_higher',
    'Percent Sick Due To Symptoms': 'percent_sick_due_to_symptoms',
    'Program Monthly Subscription': 'program_monthly_subscription',
    'Avg Sick Days': 'avg_sick_days',
}


def _to_number(label, val):
    if isinstance(val, bool):
        raise PolicyError(f"{label}: expected a number, got {val!r}")
    try:
        num = float(val)
    except (TypeError, ValueError):
        raise PolicyError(f"{label}: expected a number, got {val!r}") from None
    if not math.isfinite(num) or abs(num) > MAX_POLICY_VALUE:
        raise PolicyError(f"{label}: expected a finite number of magnitude at most {MAX_POLICY_VALUE:g}, got {val!r}")
    return num


def policy_from_dict(values, base=None):
    """Build a policy from camelCase keys; missing keys keep ``base`` values."""
    unknown = sorted(set(values) - set(API_KEYS))
    if unknown:
        raise PolicyError(f"Unknown policy constant(s): {', '.join(unknown)}")
    changes = {API_KEYS[k]: _to_number(k, v) for k, v in values.items()}
    return replace(base or PolicyConstants(), **changes)


def read_xlsx_sheet(filepath, sheet_name=None):
    wb = openpyxl.load_workbook(filepath, read_only=True, data_only=True)
    ws = wb[sheet_name] if sheet_name else wb.active
    rows = list(ws.iter_rows(values_only=True))
    wb.close()
    if len(rows) < 2:
        return []
    headers = [str(h).strip() if h else f'col_{i}' for i, h in enumerate(rows[0])]
    return [dict(zip(headers, row)) for row in rows[1:]]


def policy_path():
    return os.environ.get(POLICY_PATH_ENV) or os.path.join(DATA_DIR, 'config', 'policy.xlsx')


def load_policy(path=None):
    """Load policy constants from a Parameter/Value workbook.

    No workbook means built-in defaults. Labels not listed in
    WORKBOOK_LABELS are skipped; labels that are absent keep their default.
    """
    path = path or policy_path()
    if not os.path.exists(path):
        logger.info("No policy workbook at %s, using built-in defaults", path)
        return PolicyConstants()

    changes = {}
    for row in read_xlsx_sheet(path):
        label = str(row.get('Parameter') or '').strip()
        val = row.get('Value')
        if not label or val is None:
            continue
        if label not in WORKBOOK_LABELS:
            logger.warning("Ignoring unknown policy parameter %r in %s", label, path)
            continue
        changes[WORKBOOK_LABELS[label]] = _to_number(label, val)

    logger.info("Loaded %d policy constant(s) from %s", len(changes), path)
    return replace(PolicyConstants(), **changes)
