from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from barangay.models import (
    Announcement,
    DocumentRequest,
    Event,
    EventAttendee,
    FamilyHead,
    IdentifierSequence,
    Resident,
    User,
)


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ("username", "name", "role", "resident_id", "is_active")
    list_filter = ("role", "is_active")
    search_fields = ("username", "name", "resident_id")
    fieldsets = BaseUserAdmin.fieldsets + (
        ("Portal", {"fields": ("name", "role", "resident_id")}),
    )


@admin.register(FamilyHead)
class FamilyHeadAdmin(admin.ModelAdmin):
    list_display = ("head_id", "first_name", "last_name", "gender", "contact_number")
    search_fields = ("head_id", "first_name", "last_name")
    readonly_fields = ("head_id", "registration_date", "verification_code")


@admin.register(Resident)
class ResidentAdmin(admin.ModelAdmin):
    list_display = ("resident_id", "first_name", "last_name", "gender", "family_head")
    list_filter = ("gender",)
    search_fields = ("resident_id", "first_name", "last_name", "address")
    readonly_fields = ("resident_id", "registration_date", "verification_code")


class EventAttendeeInline(admin.TabularInline):
    model = EventAttendee
    extra = 0


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "event_date", "time", "location")
    list_filter = ("category", "event_date")
    search_fields = ("title", "location")
    readonly_fields = ("created_date", "verification_code")
    inlines = [EventAttendeeInline]


@admin.register(DocumentRequest)
class DocumentRequestAdmin(admin.ModelAdmin):
    list_display = ("request_id", "resident_name", "document_type", "status", "request_date")
    list_filter = ("status", "document_type", "delivery_option")
    search_fields = ("request_id", "resident_id", "resident_name")
    readonly_fields = ("request_id", "request_date", "verification_code")
    fieldsets = (
        ("Request", {"fields": ("request_id", "resident_id", "resident_name", "request_date")}),
        ("Document", {"fields": ("document_type", "purpose", "additional_details", "delivery_option")}),
        (
            "Processing",
            {"fields": ("status", "processing_date", "processing_notes", "processed_by")},
        ),
        ("Verification", {"fields": ("verification_code",), "classes": ("collapse",)}),
    )


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ("title", "category", "announcement_type", "date")
    list_filter = ("announcement_type", "category")
    search_fields = ("title", "content")


@admin.register(IdentifierSequence)
class IdentifierSequenceAdmin(admin.ModelAdmin):
    list_display = ("kind", "last_value", "updated_at")
    readonly_fields = ("kind", "last_value", "updated_at")
