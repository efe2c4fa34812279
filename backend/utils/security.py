"""Security helpers: PII masking and password comparison (minimal)."""
import hmac
import re
from typing import Optional


def mask_pii(text: str) -> str:
    # Phone numbers and the local part of e-mail addresses
    masked = re.sub(r"\b\d{10,}\b", "[REDACTED]", text or "")
    masked = re.sub(r"[\w.+-]+@", "[REDACTED]@", masked)
    return masked


def passwords_match(stored: Optional[str], supplied: Optional[str]) -> bool:
    if stored is None or supplied is None:
        return False
    return hmac.compare_digest(stored.encode("utf-8"), supplied.encode("utf-8"))
