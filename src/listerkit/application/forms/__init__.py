"""Application forms – default request-parameter form binding."""
from listerkit.application.forms.binder import CSRF_FIELD, CSRF_SESSION_KEY, ParamForm, ParamFormBinder

__all__ = ["CSRF_FIELD", "CSRF_SESSION_KEY", "ParamForm", "ParamFormBinder"]
