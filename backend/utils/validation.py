import re
from typing import Any, Optional

from config import settings
from exceptions import ValidationException


class InputValidator:
    """Checks on client input, applied before any pipeline work starts."""

    CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]')

    @staticmethod
    def validate_text(text: Any, min_length: Optional[int] = None) -> str:
        """
        Return `text` unchanged if it can be fact-checked.
        Cleaning and truncation are left to the pipeline, so the cache key
        is derived from what the client actually sent.
        """
        min_length = settings.MIN_TEXT_LENGTH if min_length is None else min_length

        if not isinstance(text, str) or not text:
            raise ValidationException("text", "text is required")

        if len(text) < min_length:
            raise ValidationException("text", f"text must contain at least {min_length} characters")

        return text

    @staticmethod
    def sanitize_query_parameter(param: Optional[str], max_length: int = 500) -> str:
        """Trimmed, control-character-free and length-capped query string value; "" when absent."""
        if not param:
            return ""

        param = InputValidator.CONTROL_CHARS_PATTERN.sub('', str(param)).strip()
        return param[:max_length]
