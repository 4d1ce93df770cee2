from logging import getLogger

from fontharvest.core.alias import is_alias, parse_mixed_value
from fontharvest.core.extraction import extract_first_string, extract_font_family
from fontharvest.core.font_names import is_plausible_font_name
from fontharvest.core.harvest import collect_strings_deep
from fontharvest.core.shadow import (
    extract_shadow_color_string,
    normalize_shadow_value_to_preview,
)
from fontharvest.core.transit import transit_to_plain
from fontharvest.core.typography import (
    normalize_typography_value_to_form,
    sanitize_typography_value_for_api,
)
from fontharvest.version import __version__ as __version__

logger = getLogger(__name__)

__all__ = [
    "collect_strings_deep",
    "extract_first_string",
    "extract_font_family",
    "extract_shadow_color_string",
    "is_alias",
    "is_plausible_font_name",
    "normalize_shadow_value_to_preview",
    "normalize_typography_value_to_form",
    "parse_mixed_value",
    "sanitize_typography_value_for_api",
    "transit_to_plain",
]
