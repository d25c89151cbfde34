from .utilities import ColorFormatter, setup_logging

__all__ = ["ColorFormatter", "setup_logging"]
