from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import AttendanceDayRecordViewSet
from .views import ReconciledPeriodView

router = DefaultRouter()
router.register("records", AttendanceDayRecordViewSet, basename="attendance-record")

urlpatterns = [
    path("reconciled/", ReconciledPeriodView.as_view(), name="attendance-reconciled"),
    *router.urls,
]
