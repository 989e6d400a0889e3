from django.db import models
from django.utils.translation import gettext_lazy as _


class DayType(models.TextChoices):
    WORKDAY = "WORKDAY", _("Workday")
    REST_DAY = "REST_DAY", _("Rest day")
    REGULAR_HOLIDAY = "REGULAR_HOLIDAY", _("Regular holiday")
    SPECIAL_HOLIDAY = "SPECIAL_HOLIDAY", _("Special holiday")


HOLIDAY_DAY_TYPES = frozenset({DayType.REGULAR_HOLIDAY, DayType.SPECIAL_HOLIDAY})
PREMIUM_DAY_TYPES = frozenset({DayType.REST_DAY, *HOLIDAY_DAY_TYPES})


class AttendanceStatus(models.TextChoices):
    PRESENT = "PRESENT", _("Present")
    HALF_DAY = "HALF_DAY", _("Half day")
    ON_LEAVE = "ON_LEAVE", _("On leave")
    REGULAR_HOLIDAY = "REGULAR_HOLIDAY", _("Regular holiday")
    SPECIAL_HOLIDAY = "SPECIAL_HOLIDAY", _("Special holiday")
    REST_DAY = "REST_DAY", _("Rest day")
    ABSENT = "ABSENT", _("Absent")
    NO_DATA = "NO_DATA", _("No data")


class SourceType(models.TextChoices):
    IMPORT = "IMPORT", _("Import")
    MANUAL = "MANUAL", _("Manual")
    BIOMETRIC = "BIOMETRIC", _("Biometric")
