"""Accessor name derivation and list identifiers."""

from __future__ import annotations

import uuid


def camelize(text: str, separator: str = "_") -> str:
    """Join *separator*-delimited words into lowerCamelCase.

    Spaces count as separators. Only the first letter of each word is
    upper-cased, so already camel-cased words keep their inner capitals::

        camelize("order_by_myName") == "orderByMyName"
    """
    words = text.replace(" ", separator).split(separator)
    joined = "".join(word[:1].upper() + word[1:] for word in words)
    return joined[:1].lower() + joined[1:]


def derive_method_name(prefix: str, field_name: str) -> str:
    """Return the default capability name for *field_name*.

    ``derive_method_name("filter_by", "first_name") == "filterByFirstName"``
    """
    return camelize(f"{prefix}_{field_name}")


def new_list_id() -> str:
    """Generate an opaque list identifier (UUID v4)."""
    return str(uuid.uuid4())


__all__ = ["camelize", "derive_method_name", "new_list_id"]
