"""monthcal - plain-text monthly calendar for the terminal."""

__version__ = "1.0.0"
__author__ = "monthcal Team"
__email__ = "support@monthcal.local"
__description__ = "Bordered plain-text monthly calendar with today highlighting"

# Package metadata
__all__ = [
    "__author__",
    "__description__",
    "__email__",
    "__version__",
]
