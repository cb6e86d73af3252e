from .console import ConsoleAdapter, render_activity

__all__ = ["ConsoleAdapter", "render_activity"]
