from django.urls import path
from barangay.api.auth_views import (
    ChangePasswordView,
    CheckResidentView,
    CreateAdminView,
    CurrentUserView,
    LoginView,
    RegisterView,
)
from barangay.api.views import (
    AnnouncementDetailView,
    AnnouncementListView,
    DocumentRequestDetailView,
    DocumentRequestListView,
    DocumentRequestQrCodeView,
    DocumentRequestStatusView,
    EventDetailView,
    EventListView,
    EventQrCodeView,
    EventRegisterView,
    EventUnregisterView,
    FamilyHeadDetailView,
    FamilyHeadListView,
    FamilyHeadMembersView,
    FamilyHeadQrCodeView,
    QrCodeGenerateView,
    QrCodeVerifyView,
    ResidentDetailView,
    ResidentDocumentRequestsView,
    ResidentListView,
    ResidentQrCodeView,
)

urlpatterns = [
    # Authentication
    path("auth/login/", LoginView.as_view(), name="auth-login"),
    path("auth/register/", RegisterView.as_view(), name="auth-register"),
    path("auth/me/", CurrentUserView.as_view(), name="auth-me"),
    path("auth/change-password/", ChangePasswordView.as_view(), name="auth-change-password"),
    path(
        "auth/check-resident/<str:resident_id>/",
        CheckResidentView.as_view(),
        name="auth-check-resident",
    ),
    path("auth/create-admin/", CreateAdminView.as_view(), name="auth-create-admin"),
    # Residents
    path("residents/", ResidentListView.as_view(), name="resident-list"),
    path("residents/<str:resident_id>/", ResidentDetailView.as_view(), name="resident-detail"),
    path(
        "residents/<str:resident_id>/qrcode/",
        ResidentQrCodeView.as_view(),
        name="resident-qrcode",
    ),
    # Family heads
    path("familyHeads/", FamilyHeadListView.as_view(), name="family-head-list"),
    path(
        "familyHeads/<str:head_id>/", FamilyHeadDetailView.as_view(), name="family-head-detail"
    ),
    path(
        "familyHeads/<str:head_id>/members/",
        FamilyHeadMembersView.as_view(),
        name="family-head-members",
    ),
    path(
        "familyHeads/<str:head_id>/qrcode/",
        FamilyHeadQrCodeView.as_view(),
        name="family-head-qrcode",
    ),
    # Events
    path("events/", EventListView.as_view(), name="event-list"),
    path("events/<int:event_id>/", EventDetailView.as_view(), name="event-detail"),
    path("events/<int:event_id>/qrcode/", EventQrCodeView.as_view(), name="event-qrcode"),
    path("events/<int:event_id>/register/", EventRegisterView.as_view(), name="event-register"),
    path(
        "events/<int:event_id>/register/<str:attendee_id>/",
        EventUnregisterView.as_view(),
        name="event-unregister",
    ),
    # Document requests
    path("documents/", DocumentRequestListView.as_view(), name="document-list"),
    path(
        "documents/resident/<str:resident_id>/",
        ResidentDocumentRequestsView.as_view(),
        name="document-resident-list",
    ),
    path(
        "documents/<int:request_pk>/",
        DocumentRequestDetailView.as_view(),
        name="document-detail",
    ),
    path(
        "documents/<int:request_pk>/status/",
        DocumentRequestStatusView.as_view(),
        name="document-status",
    ),
    path(
        "documents/<int:request_pk>/qrcode/",
        DocumentRequestQrCodeView.as_view(),
        name="document-qrcode",
    ),
    # Announcements
    path("announcements/", AnnouncementListView.as_view(), name="announcement-list"),
    path(
        "announcements/<int:announcement_id>/",
        AnnouncementDetailView.as_view(),
        name="announcement-detail",
    ),
    # QR codes
    path("qrcode/verify/", QrCodeVerifyView.as_view(), name="qrcode-verify"),
    path("qrcode/generate/", QrCodeGenerateView.as_view(), name="qrcode-generate"),
]
