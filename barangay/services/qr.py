"""QR code rendering for verification payloads."""

import base64
import io
import json
import qrcode
from qrcode.constants import ERROR_CORRECT_M
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder


def serialize_payload(payload) -> str:
    """Compact, key-sorted JSON so the same payload always yields the same text."""
    return json.dumps(payload, cls=DjangoJSONEncoder, separators=(",", ":"), sort_keys=True)


def encode_qr_data_url(payload) -> str:
    """
    Render a payload as a PNG QR code.

    Args:
        payload: JSON-serializable data embedded in the code

    Returns:
        str: ``data:image/png;base64,...`` URL
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_M,
        box_size=settings.QR_BOX_SIZE,
        border=settings.QR_BORDER,
    )
    qr.add_data(serialize_payload(payload))
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"
