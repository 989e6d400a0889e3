from decimal import Decimal

import pytest

from timepay.org.models import OrganizationPolicy
from timepay.policies import PayrollPolicy
from timepay.policies import get_default_policy_document
from timepay.policies import get_payroll_policy
from timepay.policies import get_policy_document
from timepay.policies.service import merge_policy
from timepay.policies.structures import parse_weekly_off


def test_default_document_builds_default_policy():
    policy = PayrollPolicy.from_document(get_default_policy_document())
    assert policy == PayrollPolicy()


def test_default_document_is_a_copy():
    doc = get_default_policy_document()
    doc["overtimePolicy"]["regularRate"] = "9"
    assert get_default_policy_document()["overtimePolicy"]["regularRate"] == "1.25"


def test_parse_weekly_off():
    assert parse_weekly_off(["Fri", "Sun", "Funday"]) == frozenset({4, 6})
    assert parse_weekly_off("Sat") == frozenset({5, 6})


def test_tax_brackets_are_sorted_by_floor():
    doc = get_default_policy_document()
    doc["taxPolicy"]["brackets"] = [
        {"over": "100", "rate": "0.5"},
        {"over": "0", "rate": "0"},
    ]
    policy = PayrollPolicy.from_document(doc)
    assert [b.over for b in policy.tax_brackets] == [Decimal(0), Decimal(100)]


@pytest.mark.django_db
def test_stored_policy_is_deep_merged_over_defaults():
    OrganizationPolicy.objects.create(
        org_id=1,
        document={
            "overtimePolicy": {"regularRate": "1.50"},
            "shiftPolicy": {"weeklyOff": ["Sun"]},
        },
    )
    doc = get_policy_document(org_id=1)
    assert doc["overtimePolicy"]["restDayRate"] == "1.30"

    policy = get_payroll_policy()
    assert policy.ot_regular_multiplier == Decimal("1.50")
    assert policy.ot_rest_day_multiplier == Decimal("1.30")
    assert policy.weekly_off == frozenset({6})


@pytest.mark.django_db
def test_other_org_keeps_defaults():
    OrganizationPolicy.objects.create(
        org_id=2, document={"nightDifferentialPolicy": {"rate": "0.20"}}
    )
    assert get_payroll_policy(org_id=1).night_diff_rate == Decimal("0.10")
    assert get_payroll_policy(org_id=2).night_diff_rate == Decimal("0.20")


def test_merge_policy_leaves_inputs_untouched():
    defaults = {"overtimePolicy": {"regularRate": "1.25", "restDayRate": "1.30"}}
    overrides = {"overtimePolicy": {"regularRate": "1.50"}, "taxPolicy": {"brackets": []}}

    merged = merge_policy(defaults, overrides)

    assert merged == {
        "overtimePolicy": {"regularRate": "1.50", "restDayRate": "1.30"},
        "taxPolicy": {"brackets": []},
    }
    assert defaults["overtimePolicy"]["regularRate"] == "1.25"
    assert merged["taxPolicy"]["brackets"] is not overrides["taxPolicy"]["brackets"]


def test_holiday_on_rest_day_rates_come_from_the_document():
    doc = get_default_policy_document()
    doc["overtimePolicy"]["regularHolidayRestDayRate"] = "3.00"
    policy = PayrollPolicy.from_document(doc)

    assert policy.ot_regular_holiday_rest_day_multiplier == Decimal("3.00")
    assert policy.ot_special_holiday_rest_day_multiplier == Decimal("1.50")
