from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import AllowAny
from barangay.api.serializers import (
    ChangePasswordSerializer,
    CreateAdminSerializer,
    LoginSerializer,
    RegisterSerializer,
    UserSerializer,
)
from barangay.api.views import validation_error
from barangay.services.auth_service import AuthService, user_summary


class LoginView(APIView):
    """
    POST /api/auth/login/

    Request body:
    {
        "username": "admin",
        "password": "secret"
    }

    Response: {"token": "...", "user": {"username", "name", "role", "residentId"}}
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        result = AuthService().login(
            serializer.validated_data["username"], serializer.validated_data["password"]
        )
        return Response(result, status=status.HTTP_200_OK)


class RegisterView(APIView):
    """
    POST /api/auth/register/

    Creates a resident account for an existing resident record.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        data = serializer.validated_data
        result = AuthService().register_resident(
            data["username"], data["password"], data["name"], data["residentId"]
        )
        return Response(result, status=status.HTTP_201_CREATED)


class CurrentUserView(APIView):
    def get(self, request):
        return Response(UserSerializer(request.user).data)


class ChangePasswordView(APIView):
    def post(self, request):
        serializer = ChangePasswordSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        AuthService().change_password(
            request.user,
            serializer.validated_data["currentPassword"],
            serializer.validated_data["newPassword"],
        )
        return Response({"message": "Password changed successfully"})


class CheckResidentView(APIView):
    """GET /api/auth/check-resident/{resident_id}/ - whether a resident already has an account."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, resident_id):
        return Response(AuthService().check_resident(resident_id))


class CreateAdminView(APIView):
    """
    POST /api/auth/create-admin/

    Request body:
    {
        "username": "captain",
        "password": "secret",
        "name": "Barangay Captain",
        "secretKey": "<ADMIN_CREATION_KEY>"
    }
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CreateAdminSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error(serializer)

        data = serializer.validated_data
        user = AuthService().create_admin(
            data["username"], data["password"], data["name"], secret_key=data["secretKey"]
        )
        return Response(
            {"message": "Admin account created successfully", "user": user_summary(user)},
            status=status.HTTP_201_CREATED,
        )
