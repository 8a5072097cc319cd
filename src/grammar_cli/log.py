import logging

DEFAULT_LOGGER_NAME = "grammar_cli"


def configure_logging(level: str = "WARNING", logger_name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Configure and return the package logger.

    Diagnostics go to the current stderr so that neither the document stream
    nor the suggestion stream ever carries log lines. Calling this again (one
    call per command invocation) replaces the handler installed by the
    previous call. Unknown level names fall back to WARNING.
    """

    logger = logging.getLogger(logger_name)
    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.WARNING)

    for existing in [h for h in logger.handlers if h.get_name() == logger_name]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(logger_name)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
    )
    logger.addHandler(handler)

    return logger
