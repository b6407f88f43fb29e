"""Textual presentation layer: widgets and the demo application."""

from typeahead.presentation.app import TypeaheadApp
from typeahead.presentation.widgets import SuggestInput

__all__ = ["TypeaheadApp", "SuggestInput"]
