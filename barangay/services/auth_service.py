import logging
from datetime import timedelta
from django.conf import settings
from django.db import transaction
from django.utils import timezone
from jose import jwt
from barangay.exceptions import BarangayError, NotFound, Unauthorized
from barangay.models import Resident, User

logger = logging.getLogger(__name__)


def create_access_token(user: User) -> str:
    """Signed token carrying the caller identity the API authorizes against."""
    claims = {
        "username": user.username,
        "name": user.name,
        "role": user.role,
        "residentId": user.resident_id,
        "exp": timezone.now() + timedelta(hours=settings.JWT_EXPIRATION_HOURS),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Raises:
        JWTError: invalid signature, malformed or expired token
    """
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])


def user_summary(user: User) -> dict:
    return {
        "username": user.username,
        "name": user.name,
        "role": user.role,
        "residentId": user.resident_id,
    }


class AuthService:
    """Service class for portal accounts and token issuance."""

    def login(self, username: str, password: str) -> dict:
        user = User.objects.filter(username=username, is_active=True).first()
        if not user or not user.check_password(password):
            logger.warning(f"Failed login attempt for {username}")
            raise BarangayError("Invalid username or password")

        logger.info(f"User {username} logged in")
        return {"token": create_access_token(user), "user": user_summary(user)}

    def register_resident(self, username: str, password: str, name: str, resident_id: str) -> dict:
        """
        Create a resident-role account bound to an existing resident record.

        Raises:
            BarangayError: username taken, unknown resident or resident already has an account
        """
        if User.objects.filter(username=username).exists():
            raise BarangayError("Username already exists")

        if not Resident.objects.filter(resident_id=resident_id).exists():
            raise BarangayError("Resident ID not found")

        if User.objects.filter(resident_id=resident_id).exists():
            raise BarangayError("Resident already has an account")

        with transaction.atomic():
            user = User.objects.create_user(
                username=username,
                password=password,
                name=name,
                role=User.ROLE_RESIDENT,
                resident_id=resident_id,
            )

        logger.info(f"Registered account {username} for resident {resident_id}")
        return {"token": create_access_token(user), "user": user_summary(user)}

    def change_password(self, user: User, current_password: str, new_password: str) -> None:
        if not user.check_password(current_password):
            raise BarangayError("Current password is incorrect")

        user.set_password(new_password)
        user.save(update_fields=["password"])
        logger.info(f"Password changed for {user.username}")

    def check_resident(self, resident_id: str) -> dict:
        if not Resident.objects.filter(resident_id=resident_id).exists():
            raise NotFound("Resident not found")
        return {"hasAccount": User.objects.filter(resident_id=resident_id).exists()}

    def create_admin(self, username: str, password: str, name: str, secret_key: str = None) -> User:
        """
        Create an administrator account.

        When ``secret_key`` is given it must match ADMIN_CREATION_KEY; the
        management command passes None because shell access is trusted.
        """
        if secret_key is not None:
            expected = settings.ADMIN_CREATION_KEY
            if not expected or secret_key != expected:
                logger.warning(f"Rejected admin creation for {username}: invalid secret key")
                raise Unauthorized("Invalid secret key")

        if User.objects.filter(username=username).exists():
            raise BarangayError("Username already exists")

        user = User.objects.create_user(
            username=username,
            password=password,
            name=name,
            role=User.ROLE_ADMIN,
            is_staff=True,
        )
        logger.info(f"Created admin account {username}")
        return user

