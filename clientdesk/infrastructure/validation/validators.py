"""
Field validation utilities.
Pure checks shared by the request DTOs; each returns the normalized value or
raises ValueError with a message suitable for showing next to the field.
"""

import math
import re
import urllib.parse
from datetime import date
from typing import Any, Optional

# Regex patterns for common validation
PATTERNS = {
    'email': re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'),
    'phone': re.compile(r'^[0-9\s\-+()]+$'),
    'currency_code': re.compile(r'^[A-Za-z]{1,3}$'),
    'whitespace': re.compile(r'\s'),
}

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 50
CURRENCY_MAX_LENGTH = 3


def blank_to_none(value: Any) -> Any:
    """Trim strings and turn blank ones into None."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class DataValidator:
    """Validators for common data formats."""

    @staticmethod
    def validate_name(name: str, max_length: int = NAME_MAX_LENGTH) -> str:
        if not isinstance(name, str):
            raise ValueError("Name is required")

        name = name.strip()
        if not name:
            raise ValueError("Name is required")
        if len(name) > max_length:
            raise ValueError(f"Name must be at most {max_length} characters")
        return name

    @staticmethod
    def validate_email(email: str) -> str:
        """Validate email shape and length, returning it trimmed and lowercased."""
        if not isinstance(email, str) or not email.strip():
            raise ValueError("Email is required")

        email = email.strip().lower()

        if len(email) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")

        if not PATTERNS['email'].match(email):
            raise ValueError("Please enter a valid email address")

        return email

    @staticmethod
    def validate_phone(phone: str) -> str:
        """Digits, spaces, hyphens, plus signs and parentheses only."""
        if not isinstance(phone, str) or not phone.strip():
            raise ValueError("Phone is required")

        phone = phone.strip()

        if len(phone) > PHONE_MAX_LENGTH:
            raise ValueError(f"Phone must be at most {PHONE_MAX_LENGTH} characters")

        if not PATTERNS['phone'].match(phone):
            raise ValueError(
                "Please enter a valid phone number "
                "(digits, spaces, hyphens, plus, parentheses allowed)"
            )

        return phone

    @staticmethod
    def validate_url(url: Optional[str]) -> Optional[str]:
        """
        Accept bare domains by checking them as https:// URLs; only http(s) schemes pass.
        The value is returned as entered (trimmed); blank becomes None.
        """
        url = blank_to_none(url)
        if url is None:
            return None

        candidate = url if '://' in url else f'https://{url}'

        if PATTERNS['whitespace'].search(candidate):
            raise ValueError("Please enter a valid URL (e.g., example.com or https://example.com)")

        try:
            parsed = urllib.parse.urlsplit(candidate)
            # Accessing port validates it
            parsed.port
        except ValueError:
            raise ValueError("Please enter a valid URL (e.g., example.com or https://example.com)")

        if parsed.scheme not in ('http', 'https') or not parsed.hostname:
            raise ValueError("Please enter a valid URL (e.g., example.com or https://example.com)")

        return url

    @staticmethod
    def validate_currency_code(currency: str) -> str:
        """Currency codes are 1-3 letters, stored uppercase."""
        if not isinstance(currency, str) or not currency.strip():
            raise ValueError("Currency is required")

        currency = currency.strip()
        if len(currency) > CURRENCY_MAX_LENGTH:
            raise ValueError("Currency code must be 3 characters")
        if not PATTERNS['currency_code'].match(currency):
            raise ValueError("Currency code must contain letters only")

        return currency.upper()


class BusinessValidator:
    """Business rule validators."""

    @staticmethod
    def validate_budget(budget: Any) -> Optional[float]:
        """Budget is optional; when given it must be a positive number."""
        budget = blank_to_none(budget)
        if budget is None:
            return None

        if isinstance(budget, bool):
            raise ValueError("Budget must be a positive number")

        try:
            amount = float(budget)
        except (TypeError, ValueError):
            raise ValueError("Budget must be a positive number")

        if not math.isfinite(amount) or amount <= 0:
            raise ValueError("Budget must be a positive number")

        return amount

    @staticmethod
    def validate_date_range(start: Optional[date], end: Optional[date]) -> None:
        """Both bounds optional; when both are set the end may not precede the start."""
        if start is not None and end is not None and end < start:
            raise ValueError("End date must be after or equal to start date")
