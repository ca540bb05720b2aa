from .logging import configure_logging, log_call

__all__ = ['configure_logging', 'log_call']
