import logging


def setup_logging(level: str = "INFO", name: str = "mastermind") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s')
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
