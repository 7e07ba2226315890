import logging
from jose import JWTError
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed
from barangay.models import User
from barangay.services.auth_service import decode_access_token

logger = logging.getLogger(__name__)


class JWTAuthentication(BaseAuthentication):
    """
    Bearer token authentication.

    Authorization: Bearer <token issued by POST /api/auth/login/>
    """

    keyword = b"bearer"

    def authenticate(self, request):
        header = get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword:
            return None

        if len(header) != 2:
            raise AuthenticationFailed("Invalid authorization header")

        try:
            payload = decode_access_token(header[1].decode("utf-8"))
        except (JWTError, UnicodeDecodeError):
            raise AuthenticationFailed("Invalid or expired token")

        user = User.objects.filter(username=payload.get("username"), is_active=True).first()
        if not user:
            logger.warning(f"Token presented for unknown user {payload.get('username')}")
            raise AuthenticationFailed("User not found")

        return (user, payload)

    def authenticate_header(self, request):
        return 'Bearer realm="api"'
