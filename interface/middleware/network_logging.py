from fastapi import Request, status

from utils.logging_config import setup_logger, log_network_io

network_logger = setup_logger("network", "network.log")


async def network_logging_middleware(request: Request, call_next):
    """Log every request together with the process network counters."""
    response_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        response_status = response.status_code
        return response
    finally:
        log_network_io(
            logger=network_logger,
            endpoint=request.url,
            method=request.method,
            response_status=response_status
        )
