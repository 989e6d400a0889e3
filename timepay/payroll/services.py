from __future__ import annotations

import logging
from collections import defaultdict
from decimal import ROUND_HALF_UP
from decimal import Decimal
from typing import TYPE_CHECKING

from django.db import transaction
from django.utils import timezone

from timepay.attendance.models import AttendanceDayRecord
from timepay.attendance.services import reconcile_period
from timepay.employees.models import Employee
from timepay.exceptions import ComputationFailure
from timepay.exceptions import StateError
from timepay.payroll.choices import RunStatus
from timepay.payroll.engine import Adjustment
from timepay.payroll.engine import ProfileTerms
from timepay.payroll.engine import compute_payslip
from timepay.payroll.models import PayPeriod
from timepay.payroll.models import PayrollAdjustment
from timepay.payroll.models import PayrollRun
from timepay.payroll.models import Payslip
from timepay.payroll.models import PayslipLine
from timepay.policies import PayrollPolicy
from timepay.policies import get_payroll_policy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from django.db.models import QuerySet

    from timepay.payroll.engine import PayslipComputation
    from timepay.users.models import User

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
_QUANTITY = Decimal("0.0001")
_RATE = Decimal("0.000001")

EDITABLE_STATUSES = (RunStatus.DRAFT, RunStatus.REVIEW)


def quantize(value: Decimal, exp: Decimal = CENT) -> Decimal:
    """Round half-up; used only when writing to the database."""
    return Decimal(value).quantize(exp, rounding=ROUND_HALF_UP)


def _transition(
    run_id: int, *, expected: Iterable[str], target: str, **fields
) -> None:
    """Move a run to `target` only if its status is still one of `expected`.

    The conditional UPDATE fences concurrent transitions: whoever updates the
    row first wins and everyone else gets a StateError.
    """

    expected = tuple(expected)
    updated = PayrollRun.objects.filter(pk=run_id, status__in=expected).update(
        status=target, updated_at=timezone.now(), **fields
    )
    if updated:
        logger.info("Payroll run %s -> %s", run_id, target)
        return
    current = PayrollRun.objects.filter(pk=run_id).values_list("status", flat=True).first()
    if current is None:
        msg = f"Payroll run {run_id} not found"
    else:
        msg = (
            f"Payroll run {run_id} is {current}; {target} requires "
            f"{' or '.join(expected)}"
        )
    logger.warning(msg)
    raise StateError(msg)


def create_payroll_run(
    pay_period: PayPeriod,
    *,
    created_by: User | None = None,
    employees: Iterable[Employee] | None = None,
    remarks: str = "",
) -> PayrollRun:
    """Open a DRAFT run; a period may only have one run that is not cancelled."""

    if PayrollRun.objects.filter(pay_period=pay_period).exclude(
        status=RunStatus.CANCELLED
    ).exists():
        msg = f"Pay period {pay_period.code} already has an open payroll run"
        raise StateError(msg)
    run = PayrollRun.objects.create(
        pay_period=pay_period, created_by=created_by, remarks=remarks
    )
    if employees:
        run.employees.set(employees)
    logger.info("Payroll run %s created for %s", run.pk, pay_period.code)
    return run


def ensure_run_editable(run: PayrollRun) -> None:
    """Adjustments may only change while the run is DRAFT or REVIEW."""

    if run.status not in EDITABLE_STATUSES:
        msg = f"Payroll run {run.pk} is {run.status}; adjustments require DRAFT or REVIEW"
        raise StateError(msg)


def run_employees(run: PayrollRun) -> QuerySet[Employee]:
    """Employees a run pays, in a stable order."""

    scoped = run.employees.all()
    employees = scoped if scoped.exists() else Employee.objects.filter(is_active=True)
    return (
        employees.filter(pay_profile__isnull=False)
        .select_related("pay_profile", "default_shift")
        .prefetch_related("pay_profile__allowances")
        .order_by("pk")
    )


def _save_payslip(
    run: PayrollRun, employee: Employee, terms: ProfileTerms, result: PayslipComputation
) -> Payslip:
    contributions = result.contributions
    payslip = Payslip.objects.create(
        run=run,
        employee=employee,
        work_days=quantize(result.work_days),
        basic_pay=quantize(result.basic_pay),
        gross_pay=quantize(result.gross_pay),
        total_deductions=quantize(result.total_deductions),
        net_pay=quantize(result.net_pay),
        taxable_income=quantize(result.taxable_income),
        withholding_tax=quantize(result.withholding_tax),
        sss_ee=quantize(contributions.sss.employee),
        sss_er=quantize(contributions.sss.employer),
        philhealth_ee=quantize(contributions.philhealth.employee),
        philhealth_er=quantize(contributions.philhealth.employer),
        pagibig_ee=quantize(contributions.pagibig.employee),
        pagibig_er=quantize(contributions.pagibig.employer),
        pay_profile_snapshot=terms.snapshot(),
    )
    PayslipLine.objects.bulk_create(
        [
            PayslipLine(
                payslip=payslip,
                category=line.category,
                description=line.description,
                quantity=quantize(line.quantity, _QUANTITY),
                rate=quantize(line.rate, _RATE),
                multiplier=quantize(line.multiplier, _QUANTITY),
                amount=quantize(line.amount),
                sort_order=line.sort_order,
            )
            for line in result.lines
        ]
    )
    return payslip


def _generate_payslips(run_id: int, policy: PayrollPolicy) -> dict:
    run = PayrollRun.objects.select_related("pay_period").get(pk=run_id)
    period = run.pay_period
    # Recompute from scratch: discard whatever a previous compute produced.
    Payslip.objects.filter(run=run).delete()
    adjustments = defaultdict(list)
    for adj in PayrollAdjustment.objects.filter(run=run).order_by("pk"):
        adjustments[adj.employee_id].append(
            Adjustment(adj.kind, adj.description, Decimal(adj.amount))
        )

    count = 0
    gross = deductions = net = Decimal("0.00")
    for employee in run_employees(run):
        terms = ProfileTerms.from_profile(employee.pay_profile)
        days = reconcile_period(employee, period.start_date, period.end_date, policy=policy)
        result = compute_payslip(terms, days, policy, adjustments.get(employee.pk, ()))
        payslip = _save_payslip(run, employee, terms, result)
        count += 1
        gross += payslip.gross_pay
        deductions += payslip.total_deductions
        net += payslip.net_pay

    return {
        "employee_count": count,
        "total_gross_pay": gross,
        "total_deductions": deductions,
        "total_net_pay": net,
    }


def compute_payroll_run(run_id: int, *, policy: PayrollPolicy | None = None) -> dict:
    """Generate payslips for a DRAFT or REVIEW run and move it to REVIEW.

    - Re-entrant: existing payslips are deleted and regenerated.
    - All payslip writes and the REVIEW transition commit together.
    - Any error rolls the batch back, resets the run to DRAFT and raises
      ComputationFailure.
    """

    with transaction.atomic():
        _transition(run_id, expected=(RunStatus.DRAFT, RunStatus.REVIEW), target=RunStatus.COMPUTING)

    try:
        with transaction.atomic():
            summary = _generate_payslips(run_id, policy or get_payroll_policy())
            _transition(
                run_id, expected=(RunStatus.COMPUTING,), target=RunStatus.REVIEW, **summary
            )
    except Exception as exc:
        PayrollRun.objects.filter(pk=run_id, status=RunStatus.COMPUTING).update(
            status=RunStatus.DRAFT, updated_at=timezone.now()
        )
        logger.exception("Payroll run %s failed to compute; reset to DRAFT", run_id)
        msg = f"Payroll run {run_id} failed to compute: {exc}"
        raise ComputationFailure(msg) from exc

    logger.info(
        "Payroll run %s computed: %s payslips", run_id, summary["employee_count"]
    )
    return {
        "employee_count": summary["employee_count"],
        "total_gross_pay": str(summary["total_gross_pay"]),
        "total_deductions": str(summary["total_deductions"]),
        "total_net_pay": str(summary["total_net_pay"]),
    }


def lock_run_attendance(run: PayrollRun, locked_at) -> int:
    """Lock every day record in the run's employee/date scope."""

    employee_ids = run.payslips.values_list("employee_id", flat=True)
    return AttendanceDayRecord.objects.filter(
        employee_id__in=employee_ids,
        attendance_date__range=(run.pay_period.start_date, run.pay_period.end_date),
    ).update(is_locked=True, locked_by_run=run, locked_at=locked_at)


@transaction.atomic
def approve_payroll_run(run_id: int, user: User) -> PayrollRun:
    """Approve a REVIEW run and lock its attendance in the same transaction.

    The creator may not approve their own run unless they hold the override
    role.
    """

    try:
        run = PayrollRun.objects.select_for_update().select_related("pay_period").get(pk=run_id)
    except PayrollRun.DoesNotExist:
        msg = f"Payroll run {run_id} not found"
        raise StateError(msg) from None
    if run.status != RunStatus.REVIEW:
        msg = f"Payroll run {run_id} is {run.status}; approval requires REVIEW"
        logger.warning(msg)
        raise StateError(msg)
    if run.created_by_id is not None and run.created_by_id == user.pk and not user.has_payroll_override():
        msg = f"User {user.pk} created payroll run {run_id} and cannot approve it"
        logger.warning(msg)
        raise StateError(msg)

    now = timezone.now()
    _transition(
        run_id,
        expected=(RunStatus.REVIEW,),
        target=RunStatus.APPROVED,
        approved_by=user,
        approved_at=now,
    )
    locked = lock_run_attendance(run, now)
    logger.info("Payroll run %s approved by %s; %s day records locked", run_id, user.pk, locked)
    run.refresh_from_db()
    return run


def release_payroll_run(run_id: int) -> PayrollRun:
    """Mark an APPROVED run as released (paid out)."""

    _transition(
        run_id,
        expected=(RunStatus.APPROVED,),
        target=RunStatus.RELEASED,
        released_at=timezone.now(),
    )
    return PayrollRun.objects.get(pk=run_id)


def cancel_payroll_run(run_id: int, reason: str = "") -> PayrollRun:
    fields = {"remarks": reason} if reason else {}
    _transition(
        run_id,
        expected=(RunStatus.DRAFT, RunStatus.REVIEW),
        target=RunStatus.CANCELLED,
        **fields,
    )
    return PayrollRun.objects.get(pk=run_id)
