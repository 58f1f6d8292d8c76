from .cli_request import request as cli

__all__ = ["cli"]
