"""edgelocale edge — CDN request adapters."""

from edgelocale.edge.cloudfront import handle_viewer_request, handler

__all__ = ["handle_viewer_request", "handler"]
