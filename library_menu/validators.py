import math
from typing import Optional


class NumberValidator:
    """Parsing for the console's numeric prompts."""

    @staticmethod
    def parse_int(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            return None

    @staticmethod
    def parse_float(raw: Optional[str]) -> Optional[float]:
        if raw is None:
            return None
        try:
            value = float(raw.strip().replace(",", "."))
        except ValueError:
            return None
        # nan and inf parse but are not usable sizes or durations
        return value if math.isfinite(value) else None
