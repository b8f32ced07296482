"""Runtime mode classification."""

import enum


class RuntimeMode(enum.StrEnum):
    """Deployment environment controlling which defaults apply."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, raw: str | None) -> "RuntimeMode":
        """Map a raw mode indicator onto a known mode.

        Matching ignores case and surrounding whitespace. Missing, empty and
        unrecognised values all fall back to DEVELOPMENT.
        """
        if not raw:
            return cls.DEVELOPMENT
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.DEVELOPMENT

    @classmethod
    def is_known(cls, raw: str) -> bool:
        """Whether a raw indicator names one of the modes."""
        return raw.strip().lower() in {mode.value for mode in cls}

    @property
    def is_development(self) -> bool:
        return self is RuntimeMode.DEVELOPMENT

    @property
    def is_test(self) -> bool:
        return self is RuntimeMode.TEST

    @property
    def is_production(self) -> bool:
        return self is RuntimeMode.PRODUCTION
