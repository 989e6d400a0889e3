from rest_framework.routers import DefaultRouter

from .views import AllowanceViewSet
from .views import PayPeriodViewSet
from .views import PayProfileViewSet
from .views import PayrollAdjustmentViewSet
from .views import PayrollRunViewSet
from .views import PayslipViewSet

router = DefaultRouter()
router.register("profiles", PayProfileViewSet, basename="pay-profile")
router.register("allowances", AllowanceViewSet, basename="allowance")
router.register("periods", PayPeriodViewSet, basename="pay-period")
router.register("runs", PayrollRunViewSet, basename="payroll-run")
router.register("payslips", PayslipViewSet, basename="payslip")
router.register("adjustments", PayrollAdjustmentViewSet, basename="payroll-adjustment")

urlpatterns = [
    *router.urls,
]
