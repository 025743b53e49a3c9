from __future__ import annotations

from datetime import date

from src.application.errors import ValidationError


def validate_period(date_from: date, date_to: date, max_days: int) -> None:
    if date_from > date_to:
        raise ValidationError("date_from must be on or before date_to")
    span = (date_to - date_from).days + 1
    if span > max_days:
        raise ValidationError(
            f"Report period cannot exceed {max_days} days",
            details={"requested_days": span, "max_days": max_days},
        )
