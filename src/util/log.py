import sys
import traceback
from typing import Any

from uvicorn.server import logger as uvicorn_logger

LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = []
    formatted_parts = []

    # prepare the print components
    for arg in args:
        if isinstance(arg, Exception):
            exceptions.append(arg)
            formatted_parts.append(f"! {str(type(arg).__name__)} (see below)")
        elif hasattr(arg, "__dict__"):
            formatted_parts.append(f"{type(arg).__name__}:\n```\n{repr(arg)}\n```")
        else:
            formatted_parts.append(f"{str(arg)}")

    # edge: no message to print
    if not formatted_parts:
        return "", exceptions

    # edge: only one message line to print
    if len(formatted_parts) == 1:
        return formatted_parts[0], exceptions

    # edge: message lines are available, but no exceptions
    if not exceptions:
        head_lines = "\n ├─ ".join(formatted_parts[:-1])
        tail_line = formatted_parts[-1]
        return f"{head_lines}\n └─ {tail_line}", exceptions

    # message and exceptions are available, connect messages with a tree
    return "\n ├─ ".join(formatted_parts), exceptions


class Logger:
    """
    Leveled logger handed to every component that needs to log. Messages go through
    uvicorn's logger when served, or straight to stdout/stderr when the level is 'local'.
    """
    level: str

    def __init__(self, level: str = "info"):
        self.level = level.lower()

    def t(self, *args: Any) -> str:
        message, exceptions = _format_args(*args)
        return self.__log_message("TRACE", message, exceptions)

    def d(self, *args: Any) -> str:
        message, exceptions = _format_args(*args)
        return self.__log_message("DEBUG", message, exceptions)

    def i(self, *args: Any) -> str:
        message, exceptions = _format_args(*args)
        return self.__log_message("INFO", message, exceptions)

    def w(self, *args: Any) -> str:
        message, exceptions = _format_args(*args)
        return self.__log_message("WARN", message, exceptions)

    def e(self, *args: Any) -> str:
        message, exceptions = _format_args(*args)
        return self.__log_message("ERROR", message, exceptions)

    def should_log(self, level: str) -> bool:
        if self.level == "local":
            return True  # we always log in local context
        current_level = LEVELS.get(self.level, 2)  # default to info
        request_level = LEVELS.get(level.lower(), 2)
        return request_level >= current_level

    def __log_message(self, level: str, message: str, exceptions: list[Exception]) -> str:
        if not self.should_log(level) and not exceptions:
            return message
        if self.level == "local":
            self.__print_locally(level, message, exceptions)
            return message

        # for uvicorn, use the uvicorn logger
        try:
            if self.should_log(level):
                match level:
                    case "TRACE" | "DEBUG":
                        uvicorn_logger.debug(message)
                    case "INFO":
                        uvicorn_logger.info(message)
                    case "WARN":
                        uvicorn_logger.warning(message)
                    case "ERROR":
                        uvicorn_logger.error(message)
            for exception in exceptions:
                uvicorn_logger.error(f"Message: {str(exception)}")
                if trace := exception.__traceback__:
                    indented_trace = "".join(traceback.format_tb(trace)).strip()
                    uvicorn_logger.error(f"Details:\n └─ {indented_trace}")
        except Exception:
            # fallback to local printing if uvicorn logger fails
            self.__print_locally(level, message, exceptions)
        return message

    def __print_locally(self, level: str, message: str, exceptions: list[Exception]):
        if self.should_log(level):
            print(f"[{level[0]}] {message}")
        for exception in exceptions:
            print(f" ‼  Message: {str(exception)}", file = sys.stderr)
            if trace := exception.__traceback__:
                trace_lines = traceback.format_tb(trace)
                indented_trace = "".join(("    " + line.strip()) for line in trace_lines)
                print(indented_trace, file = sys.stderr)
