"""Detail rendering: field normalization, list splitting, identifier scan, markup."""
from groupie.tracker.core.detail.lists import split_to_list
from groupie.tracker.core.detail.markup import to_html
from groupie.tracker.core.detail.normalize import resolve_field
from groupie.tracker.core.detail.renderer import DetailRenderer, RenderedDetail
from groupie.tracker.core.detail.scanner import scan_identifiers

__all__ = [
    "DetailRenderer", "RenderedDetail",
    "resolve_field", "scan_identifiers", "split_to_list", "to_html",
]
