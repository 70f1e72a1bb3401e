"""Presentation state (active tab and availability signals)."""

from pypostnl.state.view import Tab, ViewState

__all__ = ["Tab", "ViewState"]
