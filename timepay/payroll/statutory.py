from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from timepay.policies import ContributionRule
    from timepay.policies import PayrollPolicy
    from timepay.policies import TaxBracket

ZERO = Decimal(0)


@dataclass(frozen=True)
class Contribution:
    employee: Decimal
    employer: Decimal


@dataclass(frozen=True)
class Contributions:
    sss: Contribution
    philhealth: Contribution
    pagibig: Contribution

    @property
    def employee_total(self) -> Decimal:
        return self.sss.employee + self.philhealth.employee + self.pagibig.employee

    @property
    def employer_total(self) -> Decimal:
        return self.sss.employer + self.philhealth.employer + self.pagibig.employer


NO_CONTRIBUTIONS = Contributions(
    Contribution(ZERO, ZERO), Contribution(ZERO, ZERO), Contribution(ZERO, ZERO)
)


def period_contribution(
    rule: ContributionRule, monthly_salary: Decimal, periods_per_month: Decimal
) -> Contribution:
    """Monthly contribution on the clamped salary base, split across the month's periods."""

    base = rule.salary_base(monthly_salary)
    return Contribution(
        employee=base * rule.employee_rate / periods_per_month,
        employer=base * rule.employer_rate / periods_per_month,
    )


def compute_contributions(
    monthly_salary: Decimal, periods_per_month: Decimal, policy: PayrollPolicy
) -> Contributions:
    return Contributions(
        sss=period_contribution(policy.sss, monthly_salary, periods_per_month),
        philhealth=period_contribution(policy.philhealth, monthly_salary, periods_per_month),
        pagibig=period_contribution(policy.pagibig, monthly_salary, periods_per_month),
    )


def annual_income_tax(annual_income: Decimal, brackets: Sequence[TaxBracket]) -> Decimal:
    """Progressive tax: each slice above a bracket's floor is taxed at its rate.

    With the default table, 400,000 owes 22,500 and 800,000 owes 102,500.
    """

    tax = ZERO
    for index, bracket in enumerate(brackets):
        if annual_income <= bracket.over:
            break
        upper = brackets[index + 1].over if index + 1 < len(brackets) else None
        ceiling = annual_income if upper is None else min(annual_income, upper)
        tax += (ceiling - bracket.over) * bracket.rate
    return tax


def withholding_tax(
    taxable_income: Decimal, periods_per_year: Decimal, brackets: Sequence[TaxBracket]
) -> Decimal:
    """Annualize one period's taxable income, tax it, and divide back."""

    if taxable_income <= 0:
        return ZERO
    annual = taxable_income * periods_per_year
    return annual_income_tax(annual, brackets) / periods_per_year
