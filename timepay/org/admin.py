from django.contrib import admin

from timepay.org.models import OrganizationPolicy


@admin.register(OrganizationPolicy)
class OrganizationPolicyAdmin(admin.ModelAdmin):
    list_display = ["id", "org_id", "updated_at"]
    search_fields = ["org_id"]
