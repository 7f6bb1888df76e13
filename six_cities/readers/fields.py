"""
Field decoders for TSV offer rows

Each decoder takes the raw text of one column (or None when the row is too
short) and returns a typed value. Decoders never raise on bad input: numbers
degrade to NaN, dates to None, enumerations to the raw text.
"""

import re
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List, Union, Callable, Tuple, Type, Any

from ..models import (
    CityName, PropertyType, Amenity, UserType, User, Location, Number
)

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ';'

_INT_PREFIX = re.compile(r'\s*([+-]?\d+)')
_FLOAT_PREFIX = re.compile(r'\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))')
_DATE_ONLY = re.compile(r'\d{4}-\d{2}-\d{2}$')


def parse_text(value: Optional[str]) -> Optional[str]:
    return value


def parse_bool(value: Optional[str]) -> Optional[bool]:
    """Only the exact literal "true" is true"""
    if value is None:
        return None
    return value == 'true'


def parse_int(value: Optional[str]) -> Optional[Number]:
    """
    Parse a base-10 integer from the leading part of the text.

    Trailing characters after the digits are ignored ("12abc" -> 12).

    Returns:
        int, float('nan') if there is no numeric prefix, +/-inf if the
        digits are too long to convert, None if missing
    """
    if value is None:
        return None
    match = _INT_PREFIX.match(value)
    if not match:
        return float('nan')
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        # past the interpreter's digit limit
        return float('-inf') if digits.startswith('-') else float('inf')


def parse_float(value: Optional[str]) -> Optional[float]:
    """Parse a float from the leading part of the text, NaN if none"""
    if value is None:
        return None
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return float('nan')
    return float(match.group(1).replace('Infinity', 'inf'))


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 date/time; unparseable text yields None.

    Date-only values are UTC midnight.
    """
    if value is None:
        return None
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Invalid date: {value!r}")
        return None
    if _DATE_ONLY.match(text):
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_list(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return value.split(LIST_SEPARATOR)


def coerce_enum(enum_class: Type[Enum], value: Optional[str]) -> Optional[Union[Enum, str]]:
    """
    Map raw text to an enumeration member.

    Unknown values pass through unchanged as plain strings and are logged,
    so a bad value never drops a record.
    """
    if value is None:
        return None
    try:
        return enum_class(value)
    except ValueError:
        logger.warning(f"Unknown {enum_class.__name__} value: {value!r}")
        return value


def parse_city(value: Optional[str]):
    return coerce_enum(CityName, value)


def parse_property_type(value: Optional[str]):
    return coerce_enum(PropertyType, value)


def parse_amenities(value: Optional[str]):
    items = parse_list(value)
    if items is None:
        return None
    return [coerce_enum(Amenity, item) for item in items]


def split_fixed(value: str, count: int) -> List[Optional[str]]:
    """Split on ';' into exactly `count` positions, padding with None"""
    parts: List[Optional[str]] = value.split(LIST_SEPARATOR)[:count]
    parts.extend([None] * (count - len(parts)))
    return parts


def parse_author(value: Optional[str]) -> Optional[User]:
    """Decode "name;email;avatarUrl;password;type" into a User"""
    if value is None:
        return None
    name, email, avatar_url, password, user_type = split_fixed(value, 5)
    return User(
        name=name,
        email=email,
        avatar_url=avatar_url,
        password=password,
        type=coerce_enum(UserType, user_type),
    )


def parse_location(value: Optional[str]) -> Optional[Location]:
    """Decode "latitude;longitude" into a Location"""
    if value is None:
        return None
    latitude, longitude = split_fixed(value, 2)
    return Location(latitude=parse_float(latitude), longitude=parse_float(longitude))


# Column order of an offer row
OFFER_FIELDS: Tuple[Tuple[str, Callable[[Optional[str]], Any]], ...] = (
    ('title', parse_text),
    ('description', parse_text),
    ('post_date', parse_date),
    ('city', parse_city),
    ('preview_image', parse_text),
    ('images', parse_list),
    ('is_premium', parse_bool),
    ('is_favorite', parse_bool),
    ('rating', parse_float),
    ('type', parse_property_type),
    ('bedrooms', parse_int),
    ('max_guests', parse_int),
    ('price', parse_int),
    ('amenities', parse_amenities),
    ('author', parse_author),
    ('comment_count', parse_int),
    ('location', parse_location),
)
