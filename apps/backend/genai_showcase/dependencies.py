from fastapi import Request
from genai_showcase.services.dispatcher import Dispatcher


def get_dispatcher(request: Request) -> Dispatcher:
    """
    Returns the process-wide dispatcher built at startup.
    Raises RuntimeError if the application has not been started.
    """
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise RuntimeError("Dispatcher not initialized; application startup has not run")
    return dispatcher
