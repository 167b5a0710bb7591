"""Post-render link resolution."""
from groupie.tracker.core.links.resolver import LinkResolver

__all__ = ["LinkResolver"]
