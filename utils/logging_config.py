import os
import logging
import psutil


def setup_logger(
    logger_name: str,
    log_file: str,
    file_level: str = "INFO",
    screen_level: str = "WARNING",
) -> logging.Logger:
    """
    Set up a logger with dynamic log directory creation.

    Args:
        logger_name: Name of the logger
        log_file: Name of the log file
        file_level: Minimum level written to the log file
        screen_level: Minimum level written to the console

    Returns:
        logging.Logger: Configured logger instance
    """
    # Create logs directory if it doesn't exist
    logs_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'logs')
    os.makedirs(logs_dir, exist_ok=True)

    # Set up logger
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)

    # Add handlers only once per logger name
    if logger.handlers:
        return logger

    file_handler = logging.FileHandler(os.path.join(logs_dir, log_file))
    file_handler.setLevel(file_level)
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(screen_level)
    console_formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(console_formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def log_network_io(logger, endpoint: str, method: str, response_status: int):
    """
    Logs network I/O counters when an endpoint is called.

    Args:
        logger: Logger instance
        endpoint: The endpoint that was called
        method: HTTP method of the request
        response_status: HTTP response status code
    """
    try:
        net_io = psutil.net_io_counters()
        logger.info(
            f"Network I/O - Method {method} | Status: {response_status} | Endpoint: {endpoint} | "
            f"Bytes Sent: {net_io.bytes_sent} | Bytes Recv: {net_io.bytes_recv}"
        )
    except Exception as e:
        logger.error(f"Error logging network I/O: {str(e)}")
