"""Schema validation for the occupancy dataset."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from config.defaults import FLOORS, UNITS_PER_FLOOR


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


RECORD_FIELDS = ["owner", "area", "block", "client_id"]


def is_valid_floor(floor: str) -> bool:
    return floor in FLOORS


def parse_unit_number(key) -> Optional[int]:
    """Return the apartment number for a dataset key, or None when the key is not
    a plain decimal in 1..UNITS_PER_FLOOR ("05", "+5", " 5", "1_4" are rejected).
    """
    text = str(key)
    if not (text.isascii() and text.isdigit()) or text != str(int(text)):
        return None
    number = int(text)
    if 1 <= number <= UNITS_PER_FLOOR:
        return number
    return None


def loose_unit_number(key) -> Optional[int]:
    """What int() would make of a rejected key, to report which apartment it shadows."""
    try:
        return int(str(key).strip())
    except ValueError:
        return None


def parse_area(value) -> Optional[Decimal]:
    if value is None or str(value).strip() == "":
        return None
    try:
        area = Decimal(str(value).strip().replace(",", "."))
    except InvalidOperation:
        return None
    if not area.is_finite() or area < 0:
        return None
    return area


def _rejected_key_warning(floor: str, key, units: dict) -> str:
    loose = loose_unit_number(key)
    if loose is not None and 1 <= loose <= UNITS_PER_FLOOR:
        if str(loose) in units:
            return (
                f"Occupancy data: key '{key}' on floor '{floor}' collides with apartment "
                f"'{floor}-{loose}', ignored."
            )
        return f"Occupancy data: key '{key}' on floor '{floor}' is not a plain apartment number, ignored."
    return f"Occupancy data: apartment '{floor}-{key}' is outside 1..{UNITS_PER_FLOOR}, ignored."


def validate_dataset(raw) -> ValidationResult:
    """Check the dataset shape. Errors reject the document; warnings skip single entries."""
    result = ValidationResult()
    if not isinstance(raw, dict):
        result.is_valid = False
        result.errors.append(
            f"Occupancy data: expected an object keyed by floor, got {type(raw).__name__}."
        )
        return result

    for floor, units in raw.items():
        if not is_valid_floor(floor):
            result.warnings.append(f"Occupancy data: unknown floor '{floor}' ignored.")
            continue
        if not isinstance(units, dict):
            result.warnings.append(f"Occupancy data: floor '{floor}' is not an object, ignored.")
            continue
        seen = set()
        for key, record in units.items():
            number = parse_unit_number(key)
            if number is None:
                result.warnings.append(_rejected_key_warning(floor, key, units))
                continue
            if number in seen:
                result.warnings.append(
                    f"Occupancy data: apartment '{floor}-{number}' is listed twice, later entry ignored."
                )
                continue
            seen.add(number)
            if not isinstance(record, dict):
                result.warnings.append(
                    f"Occupancy data: apartment '{floor}-{key}' has no record fields."
                )
                continue
            unknown = sorted(set(record) - set(RECORD_FIELDS))
            if unknown:
                result.warnings.append(
                    f"Occupancy data: apartment '{floor}-{key}' has unknown fields: {', '.join(unknown)}"
                )
            if "area" in record and parse_area(record["area"]) is None:
                result.warnings.append(
                    f"Occupancy data: apartment '{floor}-{key}' has an invalid area: {record['area']!r}"
                )
    return result
