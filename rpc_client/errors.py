"""JSON-RPC error taxonomy."""

# JSON-RPC 2.0 standard codes
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

# Node-specific codes meaning "the requested object does not exist"
BLOCK_NOT_AVAILABLE = -32004
SLOT_SKIPPED = -32007
LONG_TERM_STORAGE_SLOT_SKIPPED = -32009

NOT_FOUND_CODES = {BLOCK_NOT_AVAILABLE, SLOT_SKIPPED, LONG_TERM_STORAGE_SLOT_SKIPPED}
INVALID_PARAMS_CODES = {INVALID_REQUEST, INVALID_PARAMS}


class RpcError(Exception):
    """Upstream RPC call failed."""

    def __init__(self, message: str, code: int | None = None, method: str | None = None):
        self.message = message
        self.code = code
        self.method = method
        super().__init__(self.message)


class RpcUnavailableError(RpcError):
    """Upstream unreachable, timed out or failing on its side."""


class RpcInvalidParamsError(RpcError):
    """Upstream rejected the request parameters."""


class RpcNotFoundError(RpcError):
    """Upstream reports the requested object does not exist."""


def error_from_response(error: dict, method: str) -> RpcError:
    """Map a JSON-RPC error object to an exception."""
    code = error.get("code")
    message = f"{method}: {error.get('message', 'unknown error')}"
    if code in INVALID_PARAMS_CODES:
        return RpcInvalidParamsError(message, code, method)
    if code in NOT_FOUND_CODES:
        return RpcNotFoundError(message, code, method)
    return RpcUnavailableError(message, code, method)
