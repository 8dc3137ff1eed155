# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - forms.py: urlencoded body / query string decoding and value rendering
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.forms import FORM_CONTENT_TYPE, UNDEFINED, parse_form, render_value, split_key

__all__ = [
    "FORM_CONTENT_TYPE",
    "UNDEFINED",
    "parse_form",
    "render_value",
    "split_key",
]
