import re
from datetime import date, datetime

from django.core.exceptions import ValidationError
from django.core.validators import EmailValidator, URLValidator


email_validator = EmailValidator()
url_validator = URLValidator(schemes=["http", "https"])

DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%Y-%m-%dT%H:%M:%S")

MIN_AGE = 14
MAX_AGE = 100


def validate_email(email):
    if not email or not str(email).strip():
        return False, "Email is required"
    try:
        email_validator(str(email).strip())
    except ValidationError:
        return False, "Invalid email format"
    return True, None


def validate_phone(phone):
    """
    Brazilian phone with area code.
    Accepts (51) 99999-9999, 51999999999, +5551999999999.
    """
    if not phone:
        return False, "Phone is required"

    digits = re.sub(r"\D", "", str(phone))
    if len(digits) < 10 or len(digits) > 13:
        return False, "Phone must have between 10 and 13 digits"

    ddd = digits[2:4] if len(digits) >= 12 else digits[:2]
    if not 11 <= int(ddd) <= 99:
        return False, "Invalid area code"

    return True, None


def format_phone(phone):
    if not phone:
        return ""
    digits = re.sub(r"\D", "", str(phone))
    if len(digits) == 11:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    if len(digits) == 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return phone


def validate_url(url, field_name="URL"):
    if not url:
        return True, None
    try:
        url_validator(str(url).strip())
    except ValidationError:
        return False, f"{field_name} is not a valid URL"
    return True, None


def parse_date_value(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def validate_birth_date(value, today=None):
    if not value:
        return True, None

    parsed = parse_date_value(value)
    if parsed is None:
        return False, "Invalid birth date"

    today = today or date.today()
    age = today.year - parsed.year - ((today.month, today.day) < (parsed.month, parsed.day))
    if age < MIN_AGE or age > MAX_AGE:
        return False, f"Birth date gives an implausible age ({age})"
    return True, None


def import_row_warnings(record, row_number):
    """
    Soft checks for one imported record. Never rejects the row.
    """
    warnings = []

    def warn(message):
        warnings.append(f"Row {row_number}: {message}")

    ok, message = validate_email(record.get("email"))
    if not ok and record.get("email"):
        warn(message)

    if record.get("phone"):
        ok, message = validate_phone(record["phone"])
        if not ok:
            warn(message)

    for key in ("cvUrl", "portfolioUrl", "photoUrl"):
        ok, message = validate_url(record.get(key), key)
        if not ok:
            warn(message)

    ok, message = validate_birth_date(record.get("birthDate"))
    if not ok:
        warn(message)

    return warnings
