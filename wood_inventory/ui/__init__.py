from .helpers import call_api, handle_api_error, show_error, show_success, show_warning
from .theme import load_css

__all__ = [
    "call_api",
    "handle_api_error",
    "load_css",
    "show_error",
    "show_success",
    "show_warning",
]
