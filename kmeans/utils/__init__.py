from .logging import format_run_prefix, setup_logger

__all__ = ["setup_logger", "format_run_prefix"]
