"""Category profile returned by the category normalizer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CategoryProfile(BaseModel):
    """Display and hierarchy information for one raw category or tag.

    ``primary`` is the taxonomy key the value belongs to.  ``secondary`` is
    the canonical spelling of the value when it is a sub-category, and None
    when the value is itself a primary (or unknown, or blank).
    """

    model_config = ConfigDict(frozen=True)

    display: str
    color: str
    primary: str
    secondary: str | None = None

    @property
    def is_secondary(self) -> bool:
        return self.secondary is not None
