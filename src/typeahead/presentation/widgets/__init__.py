"""
Textual widgets rendering the suggestion controller.
"""

from .suggest_field import SuggestField
from .suggest_input import SuggestInput
from .suggestion_list import SuggestionList, default_render_option

__all__ = [
    "SuggestField",
    "SuggestInput",
    "SuggestionList",
    "default_render_option",
]
