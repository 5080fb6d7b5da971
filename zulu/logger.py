import os
import logging
from datetime import datetime

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(name, testing=False, log_file=None):
    """Setup logger that can be toggled for testing"""
    logger = logging.getLogger(name)

    if testing:
        if log_file is None:
            log_file = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'zulu.log')
        log_file = os.path.abspath(log_file)

        # One shared file handler on the root logger for all modules
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == log_file
                   for h in logging.root.handlers):
            handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))

            logging.root.addHandler(handler)
            logging.root.setLevel(logging.DEBUG)

            logging.info('=' * 50)
            logging.info(f'Logging started at {datetime.now()}')
            logging.info('=' * 50)

    return logger
