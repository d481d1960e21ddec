from __future__ import annotations

import base64
import binascii
import io
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

import qrcode

from ..core.constants import DEFAULT_QR_TOKEN_TTL_MINUTES


@dataclass(frozen=True)
class CheckinToken:
    token: str
    issued_at: datetime
    expires_at: datetime


def _epoch_ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def issue_checkin_token(
    now: datetime,
    *,
    ttl_minutes: int = DEFAULT_QR_TOKEN_TTL_MINUTES,
    nonce: Optional[str] = None,
) -> CheckinToken:
    """Issue a site check-in token encoding its issue time."""
    nonce = nonce or secrets.token_hex(6)
    raw = f"{_epoch_ms(now)}_{nonce}".encode("ascii")
    token = base64.urlsafe_b64encode(raw).decode("ascii")
    return CheckinToken(token=token, issued_at=now, expires_at=now + timedelta(minutes=ttl_minutes))


def validate_checkin_token(token: Optional[str], now: datetime, *, ttl_minutes: int = DEFAULT_QR_TOKEN_TTL_MINUTES) -> bool:
    """True if ``token`` was issued by ``issue_checkin_token`` within the TTL.

    Malformed tokens are reported as invalid, never raised.
    """
    if not token:
        return False
    try:
        decoded = base64.urlsafe_b64decode(token.encode("ascii")).decode("ascii")
        issued_ms = int(decoded.split("_", 1)[0])
    except (binascii.Error, UnicodeError, ValueError):
        return False

    age_ms = _epoch_ms(now) - issued_ms
    return 0 <= age_ms < ttl_minutes * 60 * 1000


def render_checkin_qr(token: CheckinToken | str) -> bytes:
    """PNG bytes of the QR code employees scan at the site."""
    data = token.token if isinstance(token, CheckinToken) else token

    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
