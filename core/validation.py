"""
core/validation.py -- Field rules for incoming vehicle and administrator data.

Pure functions: each takes any object exposing the expected attributes (an
API DTO or a domain dataclass) and returns the list of violated-rule messages.
Every rule is checked independently, so a request that breaks three rules gets
three messages back. An empty list means the input is valid.

Role is deliberately lenient: a missing role is an error, but an unknown role
string is not -- auth.models.Role.parse() maps it to Editor when the record is
built.
"""

from typing import Any

MIN_VEHICLE_YEAR = 1950
# Upper bound of a 32-bit signed INTEGER column.
MAX_VEHICLE_YEAR = 2**31 - 1
MAX_NAME_LENGTH = 150
MAX_BRAND_LENGTH = 100

MSG_NAME_EMPTY = "name must not be empty"
MSG_BRAND_EMPTY = "brand must not be empty"
MSG_VEHICLE_TOO_OLD = f"vehicle too old, only years ≥ {MIN_VEHICLE_YEAR} accepted"
MSG_NAME_TOO_LONG = f"name must be at most {MAX_NAME_LENGTH} characters"
MSG_BRAND_TOO_LONG = f"brand must be at most {MAX_BRAND_LENGTH} characters"
MSG_YEAR_OUT_OF_RANGE = f"year must be at most {MAX_VEHICLE_YEAR}"

MSG_EMAIL_EMPTY = "email must not be empty"
MSG_PASSWORD_EMPTY = "password must not be empty"
MSG_ROLE_EMPTY = "role must not be empty"


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def validate_vehicle(dto: Any) -> list[str]:
    """Check name, brand and year. Expects .name, .brand and .year attributes."""
    messages: list[str] = []
    if _is_blank(dto.name):
        messages.append(MSG_NAME_EMPTY)
    elif len(dto.name) > MAX_NAME_LENGTH:
        messages.append(MSG_NAME_TOO_LONG)
    if _is_blank(dto.brand):
        messages.append(MSG_BRAND_EMPTY)
    elif len(dto.brand) > MAX_BRAND_LENGTH:
        messages.append(MSG_BRAND_TOO_LONG)
    if dto.year is None or dto.year < MIN_VEHICLE_YEAR:
        messages.append(MSG_VEHICLE_TOO_OLD)
    elif dto.year > MAX_VEHICLE_YEAR:
        messages.append(MSG_YEAR_OUT_OF_RANGE)
    return messages


def validate_administrator(dto: Any) -> list[str]:
    """Check email, password and role presence. Expects .email, .password and .role."""
    messages: list[str] = []
    if _is_blank(dto.email):
        messages.append(MSG_EMAIL_EMPTY)
    if not dto.password:
        messages.append(MSG_PASSWORD_EMPTY)
    if _is_blank(dto.role):
        messages.append(MSG_ROLE_EMPTY)
    return messages
