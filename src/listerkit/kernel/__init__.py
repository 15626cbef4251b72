"""Kernel – errors, naming helpers and the Bag collection."""
from listerkit.kernel.bag import Bag
from listerkit.kernel.naming import camelize, derive_method_name, new_list_id

__all__ = ["Bag", "camelize", "derive_method_name", "new_list_id"]
