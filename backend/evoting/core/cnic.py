"""
National identifier (CNIC) normalisation.

A CNIC is 13 digits, written either plain ("1234512345671") or grouped
5-7-1 with hyphens ("12345-1234567-1"). Both spellings are stored and
compared in the grouped form.
"""
import re

from evoting.core.exceptions import ValidationError


_CNIC_PATTERN = re.compile(r"^(\d{13}|\d{5}-\d{7}-\d)$", re.ASCII)


def is_valid_cnic(raw: str) -> bool:
    return bool(raw) and bool(_CNIC_PATTERN.match(raw.strip()))


def normalize_cnic(raw: str) -> str:
    """Return the grouped form of ``raw`` or raise ValidationError."""
    if not raw or not is_valid_cnic(raw):
        raise ValidationError(
            "CNIC must be 13 digits, with or without hyphens "
            "(e.g. 1234512345671 or 12345-1234567-1)"
        )

    digits = raw.strip().replace("-", "")
    return f"{digits[:5]}-{digits[5:12]}-{digits[12]}"
