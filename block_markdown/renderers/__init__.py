"""Renderer implementations and helpers."""

from .base import RenderOptions, Renderer, RendererComponent
from .html import HtmlRenderer

__all__ = ["HtmlRenderer", "RenderOptions", "Renderer", "RendererComponent"]
