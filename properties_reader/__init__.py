"""Read Java style .properties files into nested configuration documents."""

__version__ = "0.1.0"
