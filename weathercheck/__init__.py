"""Current weather lookup from Open-Meteo with outdoor-activity advice and warnings."""

__version__ = "0.1.0"
__all__ = ["__version__"]