"""Configuration errors – invalid list definitions and backend capabilities."""

from __future__ import annotations

from typing import Any

from listerkit.kernel.errors.base import ListerKitError


class ConfigError(ListerKitError):
    """A list, filter, sorter or setting is configured in an unusable way."""

    default_code = "config_error"


class FilterError(ConfigError):
    """A filter cannot be constructed or applied."""

    default_code = "filter_error"
    subject_field = "filter_name"

    def __init__(
        self,
        message: str,
        *,
        filter_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.filter_name = filter_name


class SorterError(ConfigError):
    """A sorter cannot be applied."""

    default_code = "sorter_error"
    subject_field = "sorter_name"

    def __init__(
        self,
        message: str,
        *,
        sorter_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.sorter_name = sorter_name


__all__ = ["ConfigError", "FilterError", "SorterError"]
