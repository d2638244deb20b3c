"""QR code rendering for redemption codes."""

from io import BytesIO

import qrcode
from django.conf import settings

from ..models import Redemption


def generate_redemption_qr(redemption: Redemption) -> bytes:
    """
    Render the redemption code as a PNG QR image.

    The business scans this code and submits it to the validation
    endpoint. Error correction level M tolerates smudged phone screens.

    Args:
        redemption: Redemption to encode

    Returns:
        PNG image bytes
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=settings.REDEMPTION_QR_BOX_SIZE,
        border=4,
    )
    qr.add_data(redemption.redemption_code)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buffer = BytesIO()
    img.save(buffer, format='PNG')
    return buffer.getvalue()
