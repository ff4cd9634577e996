"""Field rules shared by the Employee model, the HTML form and the API."""

from __future__ import annotations

import re
from contextlib import suppress
from pathlib import Path

from django.core.exceptions import ValidationError
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from PIL import Image
from PIL.Image import UnidentifiedImageError

MAX_PHOTO_MB = 5
MAX_DOC_MB = 15
ALLOWED_IMAGE_EXTS = {".jpg", ".jpeg"}
ALLOWED_DOC_EXTS = {".pdf"}
PDF_MAGIC = b"%PDF-"
# CMND has 9 digits, CCCD has 12
IDENTITY_CARD_LENGTHS = (9, 12)

_DIGITS_RE = re.compile(r"^\d+$")
_PHONE_RE = re.compile(r"^0\d{9}$")


def validate_identity_card(value: str) -> None:
    value = (value or "").strip()
    if not _DIGITS_RE.match(value) or len(value) not in IDENTITY_CARD_LENGTHS:
        raise ValidationError(
            _("Identity card number must have 9 or 12 digits."),
            code="invalid_identity_card",
        )


def validate_phone(value: str) -> None:
    if not value:
        return
    if not _PHONE_RE.match(value.strip()):
        raise ValidationError(
            _("Phone number must have 10 digits and start with 0."),
            code="invalid_phone",
        )


def validate_not_in_future(value) -> None:
    if value and value > timezone.localdate():
        raise ValidationError(_("Date cannot be in the future."), code="future_date")


def validate_contract_period(start, end) -> None:
    """Raise a field-keyed error when the contract ends before it starts."""
    if start and end and end < start:
        raise ValidationError(
            {
                "contract_end_date": ValidationError(
                    _("Contract end date cannot be before the start date."),
                    code="contract_period",
                )
            }
        )


def _size_mb(f) -> float:
    return (getattr(f, "size", 0) or 0) / (1024 * 1024)


def validate_jpeg_upload(f) -> None:
    if not f:
        return
    size_mb = _size_mb(f)
    if size_mb > MAX_PHOTO_MB:
        msg = f"Image too large: {size_mb:.1f} MB > {MAX_PHOTO_MB} MB"
        raise ValidationError(msg, code="file_too_large")
    ext = Path(getattr(f, "name", "") or "").suffix
    if ext.lower() not in ALLOWED_IMAGE_EXTS:
        allowed = ", ".join(sorted(ALLOWED_IMAGE_EXTS))
        msg = f"Unsupported image type '{ext}'. Allowed: {allowed}"
        raise ValidationError(msg, code="invalid_extension")
    try:
        f.seek(0)
        with Image.open(f) as image:
            image_format = image.format
            image.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValidationError(_("Invalid image file"), code="invalid_image") from exc
    finally:
        with suppress(Exception):
            f.seek(0)
    if image_format != "JPEG":
        raise ValidationError(_("Image must be a JPEG file"), code="invalid_image")


def validate_pdf_upload(f) -> None:
    if not f:
        return
    size_mb = _size_mb(f)
    if size_mb > MAX_DOC_MB:
        msg = f"File too large: {size_mb:.1f} MB > {MAX_DOC_MB} MB"
        raise ValidationError(msg, code="file_too_large")
    ext = Path(getattr(f, "name", "") or "").suffix
    if ext.lower() not in ALLOWED_DOC_EXTS:
        msg = f"Unsupported file type '{ext}'. Allowed: .pdf"
        raise ValidationError(msg, code="invalid_extension")
    try:
        f.seek(0)
        header = f.read(len(PDF_MAGIC))
    finally:
        with suppress(Exception):
            f.seek(0)
    if header != PDF_MAGIC:
        raise ValidationError(_("Contract file is not a valid PDF"), code="invalid_pdf")
