from csf2det.utils.logger import Logger, new_logger

__all__ = ["Logger", "new_logger"]
