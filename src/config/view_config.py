"""Configuration for the nested table view."""

from dataclasses import dataclass, replace
from typing import Tuple

from utils.env import env_flag


@dataclass(frozen=True)
class ViewConfig:
    """Display and indexing options for a rendering session."""

    column_headers: Tuple[str, ...] = ("Label", "Value")
    """Header text for the payload display fields"""

    expand_roots: bool = True
    """Render top-level rows with their first-level children revealed"""

    strict_index: bool = False
    """Reject duplicate payload values instead of last-write-wins"""

    sort_rows: bool = False
    """Order rows by their display fields instead of insertion order"""

    window_title: str = "Nested Grid"
    """Main window title"""


DEFAULT_VIEW_CONFIG = ViewConfig()


def get_view_config() -> ViewConfig:
    """Return the default config with environment overrides applied.

    NESTGRID_STRICT and NESTGRID_SORT_ROWS accept the usual truthy values.
    """
    return replace(
        DEFAULT_VIEW_CONFIG,
        strict_index=env_flag("NESTGRID_STRICT", DEFAULT_VIEW_CONFIG.strict_index),
        sort_rows=env_flag("NESTGRID_SORT_ROWS", DEFAULT_VIEW_CONFIG.sort_rows),
    )
