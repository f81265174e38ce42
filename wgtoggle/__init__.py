"""Status and control helper for AmneziaWG tunnels."""

__version__ = "0.1.0"
