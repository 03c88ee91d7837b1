from importlib.resources import files

from .colloquial import render_colloquial, select_dominant
from .components import RenderEntry, format_components, render
from .config import FormatterConfig
from .formatter import DeltaFormatter, format_delta, format_interval
from .localization import BundleLocalizer, Localizer, TableLocalizer, available_locales
from .moments import GREGORIAN, Moment, days_in_week, decompose
from .styles import PresentationStyle
from .units import BASE_UNITS, TimeUnit, UnitDelta
from .zero import ZeroBehavior, trim

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "DeltaFormatter",
    "FormatterConfig",
    "PresentationStyle",
    "ZeroBehavior",
    "TimeUnit",
    "UnitDelta",
    "BASE_UNITS",
    "Moment",
    "GREGORIAN",
    "RenderEntry",
    "Localizer",
    "TableLocalizer",
    "BundleLocalizer",
    "available_locales",
    "format_delta",
    "format_interval",
    "format_components",
    "render",
    "render_colloquial",
    "select_dominant",
    "decompose",
    "days_in_week",
    "trim",
    "docs",
]
