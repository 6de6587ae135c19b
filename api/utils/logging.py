# File: api/utils/logging.py
import logging
import sys
import time

from api.utils.config import Config

class TimezoneFormatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        # Local time for log timestamps
        return time.strftime(datefmt or self.default_time_format, 
                            time.localtime(record.created))

def setup_logger(name):
    """Set up a logger with proper formatting and handlers."""
    logger = logging.getLogger(name)
    
    # Production logs at INFO, everything else (or DEBUG=true) at DEBUG
    if Config.DEBUG or not Config.is_production():
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    # Avoid duplicate handlers when the app module is re-imported
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(TimezoneFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(console_handler)
    
    return logger

