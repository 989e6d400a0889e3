from decimal import ROUND_HALF_UP
from decimal import Decimal

from timepay.payroll.statutory import annual_income_tax
from timepay.payroll.statutory import compute_contributions
from timepay.payroll.statutory import withholding_tax
from timepay.policies import PayrollPolicy

POLICY = PayrollPolicy()


def test_annual_tax_is_marginal():
    brackets = POLICY.tax_brackets
    assert annual_income_tax(Decimal("250000"), brackets) == 0
    assert annual_income_tax(Decimal("400000"), brackets) == Decimal("22500")
    assert annual_income_tax(Decimal("800000"), brackets) == Decimal("102500")


def test_withholding_annualizes_and_divides_back():
    tax = withholding_tax(Decimal("20000"), Decimal(24), POLICY.tax_brackets)
    # 480,000 a year owes 22,500 + 80,000 x 20%.
    assert tax * 24 == Decimal("38500")
    assert tax.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP) == Decimal("1604.17")


def test_no_tax_on_zero_or_negative_income():
    assert withholding_tax(Decimal("0"), Decimal(24), POLICY.tax_brackets) == 0
    assert withholding_tax(Decimal("-10"), Decimal(24), POLICY.tax_brackets) == 0


def test_contributions_split_per_period():
    result = compute_contributions(Decimal("26000"), Decimal(2), POLICY)
    assert result.sss.employee == Decimal("585")
    assert result.sss.employer == Decimal("1235")
    assert result.philhealth.employee == Decimal("325")
    # Pag-IBIG is capped at a 10,000 salary base.
    assert result.pagibig.employee == Decimal("100")
    assert result.employee_total == Decimal("1010")


def test_salary_base_is_clamped():
    low = compute_contributions(Decimal("8000"), Decimal(1), POLICY)
    high = compute_contributions(Decimal("50000"), Decimal(1), POLICY)
    assert low.philhealth.employee == Decimal("250")
    assert high.sss.employee == Decimal("1350")
