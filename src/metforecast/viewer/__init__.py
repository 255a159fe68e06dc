"""Forecast viewer - gateway client, session state and page rendering."""

from .client import GatewayClient, GatewayError
from .controller import ForecastViewer
from .render import PageContextBuilder, TemplateRenderer
from .state import ViewerState

__all__ = [
    "ForecastViewer",
    "GatewayClient",
    "GatewayError",
    "PageContextBuilder",
    "TemplateRenderer",
    "ViewerState",
]
