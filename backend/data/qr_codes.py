"""QR code payloads for branches.

A branch QR code encodes ``BRANCH_<id>``; the image is stored on the branch as an
SVG data URL so no imaging library is needed.
"""
import base64
from typing import Optional

import qrcode
from qrcode.image.svg import SvgPathImage

QR_PREFIX = "BRANCH_"


def branch_qr_payload(branch_id: int) -> str:
    return f"{QR_PREFIX}{branch_id}"


def parse_branch_qr(qr_id: str) -> Optional[int]:
    """Return the branch id encoded in ``qr_id`` or None when it is malformed."""
    if not qr_id or not qr_id.startswith(QR_PREFIX):
        return None
    raw = qr_id[len(QR_PREFIX):]
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)


def qr_data_url(payload: str) -> str:
    img = qrcode.make(payload, image_factory=SvgPathImage, box_size=10)
    svg = img.to_string()
    return "data:image/svg+xml;base64," + base64.b64encode(svg).decode("ascii")
