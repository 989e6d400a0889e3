from celery import shared_task

from timepay.payroll.services import compute_payroll_run


@shared_task(name="payroll.compute_run")
def compute_run_task(run_id: int) -> dict:
    """Celery task wrapper to compute payslips for a payroll run."""
    return compute_payroll_run(run_id)
