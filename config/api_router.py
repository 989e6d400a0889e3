from django.urls import include
from django.urls import path

app_name = "api"
urlpatterns = [
    path("attendance/", include("timepay.attendance.api.urls")),
    path("payroll/", include("timepay.payroll.api.urls")),
]
