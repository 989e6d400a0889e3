from __future__ import annotations

import copy
from typing import Any

# Philippine labor and statutory defaults. Rates are strings so they convert
# to Decimal without float artifacts.
DEFAULT_POLICY_DOCUMENT: dict[str, Any] = {
    "shiftPolicy": {
        "weeklyOff": ["Sat", "Sun"],
        "standardHoursPerDay": 8,
        "standardWorkDaysPerMonth": 26,
    },
    "overtimePolicy": {
        "regularRate": "1.25",
        "restDayRate": "1.30",
        "regularHolidayRate": "2.00",
        "specialHolidayRate": "1.30",
        # A holiday falling on the employee's rest day.
        "regularHolidayRestDayRate": "2.60",
        "specialHolidayRestDayRate": "1.50",
    },
    "nightDifferentialPolicy": {
        "rate": "0.10",
    },
    "holidayPolicy": {
        # Share of the daily rate paid for an unworked regular holiday.
        "unworkedRegularHolidayRate": "1.00",
    },
    "statutoryPolicy": {
        "sss": {"employeeRate": "0.045", "employerRate": "0.095", "salaryCap": "30000"},
        "philhealth": {
            "employeeRate": "0.025",
            "employerRate": "0.025",
            "salaryFloor": "10000",
            "salaryCeiling": "100000",
        },
        "pagibig": {"employeeRate": "0.02", "employerRate": "0.02", "salaryCap": "10000"},
    },
    "taxPolicy": {
        # Annual marginal brackets: income above `over` is taxed at `rate`.
        "brackets": [
            {"over": "0", "rate": "0"},
            {"over": "250000", "rate": "0.15"},
            {"over": "400000", "rate": "0.20"},
            {"over": "800000", "rate": "0.25"},
            {"over": "2000000", "rate": "0.30"},
            {"over": "8000000", "rate": "0.35"},
        ],
    },
}


def get_default_policy_document() -> dict[str, Any]:
    """Return a fresh copy of the default policy document."""

    return copy.deepcopy(DEFAULT_POLICY_DOCUMENT)
