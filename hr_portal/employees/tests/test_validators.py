import datetime as dt

import pytest
from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone

from hr_portal.employees.validators import validate_contract_period
from hr_portal.employees.validators import validate_identity_card
from hr_portal.employees.validators import validate_jpeg_upload
from hr_portal.employees.validators import validate_not_in_future
from hr_portal.employees.validators import validate_pdf_upload
from hr_portal.employees.validators import validate_phone
from tests.factories import jpeg_upload
from tests.factories import pdf_upload
from tests.factories import png_upload


@pytest.mark.parametrize("value", ["123456789", "012345678901"])
def test_identity_card_accepts_cmnd_and_cccd(value):
    validate_identity_card(value)


@pytest.mark.parametrize("value", ["", "12345678", "1234567890", "12345678901a"])
def test_identity_card_rejects_other_shapes(value):
    with pytest.raises(ValidationError):
        validate_identity_card(value)


def test_phone_is_optional_but_must_be_ten_digits():
    validate_phone("")
    validate_phone("0912345678")
    with pytest.raises(ValidationError):
        validate_phone("912345678")
    with pytest.raises(ValidationError):
        validate_phone("09123456ab")


def test_date_of_birth_cannot_be_in_the_future():
    validate_not_in_future(None)
    validate_not_in_future(timezone.localdate())
    with pytest.raises(ValidationError):
        validate_not_in_future(timezone.localdate() + dt.timedelta(days=1))


def test_contract_period_error_is_keyed_on_end_date():
    validate_contract_period(dt.date(2025, 1, 1), None)
    validate_contract_period(dt.date(2025, 1, 1), dt.date(2025, 1, 1))
    with pytest.raises(ValidationError) as excinfo:
        validate_contract_period(dt.date(2025, 2, 1), dt.date(2025, 1, 1))
    assert "contract_end_date" in excinfo.value.message_dict


def test_jpeg_upload_accepts_real_jpeg_and_rewinds():
    upload = jpeg_upload()
    validate_jpeg_upload(upload)
    assert upload.tell() == 0


def test_jpeg_upload_rejects_png_even_when_renamed():
    with pytest.raises(ValidationError):
        validate_jpeg_upload(png_upload("photo.png"))
    with pytest.raises(ValidationError):
        validate_jpeg_upload(png_upload("disguised.jpg"))


def test_jpeg_upload_rejects_garbage_bytes():
    upload = SimpleUploadedFile("photo.jpeg", b"not an image", content_type="image/jpeg")
    with pytest.raises(ValidationError):
        validate_jpeg_upload(upload)


def test_jpeg_upload_rejects_oversized_file(monkeypatch):
    upload = jpeg_upload()
    monkeypatch.setattr(upload, "size", 6 * 1024 * 1024)
    with pytest.raises(ValidationError, match="too large"):
        validate_jpeg_upload(upload)


def test_pdf_upload_checks_extension_and_header():
    validate_pdf_upload(pdf_upload())
    with pytest.raises(ValidationError):
        validate_pdf_upload(pdf_upload("contract.docx"))
    with pytest.raises(ValidationError):
        validate_pdf_upload(pdf_upload("contract.pdf", content=b"plain text"))
