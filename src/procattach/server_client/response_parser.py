"""
Server response validators.

Strict validation for every server response. No default values or inferred
substitutes: any mismatch raises MalformedResponseError before the payload
reaches the data model.
"""

from typing import Any, Dict, List

from ..data_models import ProcessDescriptor, ServerInfo
from ..exceptions import MalformedResponseError

SERVER_INFO_PATH = "/serverinfo"
ENUM_PROCESS_PATH = "/enumprocess"

_SERVER_INFO_STRING_FIELDS = ("mode", "target_os", "arch", "git_hash")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _require_object(payload: Any, *, path: str, what: str) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"{what} must be a JSON object, got {type(payload).__name__}", path=path)
    return payload


def parse_server_info(payload: Any) -> ServerInfo:
    """
    Validate an identity probe response.

    Expected structure:
    {
        "mode": "...",
        "target_os": "...",
        "arch": "...",
        "pid": 1234,
        "git_hash": "..."
    }
    """
    data = _require_object(payload, path=SERVER_INFO_PATH, what="Server info")

    missing = [name for name in (*_SERVER_INFO_STRING_FIELDS, "pid") if name not in data]
    if missing:
        raise MalformedResponseError(
            f"Server info missing fields {missing}. Available fields: {sorted(data.keys())}",
            path=SERVER_INFO_PATH,
        )

    for name in _SERVER_INFO_STRING_FIELDS:
        if not isinstance(data[name], str):
            raise MalformedResponseError(f"Server info field '{name}' must be a string", path=SERVER_INFO_PATH)
    if not data["mode"]:
        raise MalformedResponseError("Server info field 'mode' must not be empty", path=SERVER_INFO_PATH)

    pid = data["pid"]
    if not _is_integer(pid) or pid < 0:
        raise MalformedResponseError(f"Server info field 'pid' must be a non-negative integer, got {pid!r}", path=SERVER_INFO_PATH)

    return ServerInfo(
        mode=data["mode"],
        target_os=data["target_os"],
        arch=data["arch"],
        pid=pid,
        build_id=data["git_hash"],
    )


def parse_process_entry(entry: Any, index: int) -> ProcessDescriptor:
    """Validate a single ``{pid, processname}`` entry from the process list."""
    item = _require_object(entry, path=ENUM_PROCESS_PATH, what=f"Process entry {index}")

    if "pid" not in item or "processname" not in item:
        raise MalformedResponseError(
            f"Process entry {index} must have 'pid' and 'processname'. Available fields: {sorted(item.keys())}",
            path=ENUM_PROCESS_PATH,
        )

    pid = item["pid"]
    if not _is_integer(pid):
        raise MalformedResponseError(f"Process entry {index} pid must be an integer, got {pid!r}", path=ENUM_PROCESS_PATH)

    name = item["processname"]
    if not isinstance(name, str):
        raise MalformedResponseError(f"Process entry {index} processname must be a string", path=ENUM_PROCESS_PATH)

    return ProcessDescriptor(pid=pid, process_name=name)


def parse_process_list(payload: Any) -> List[ProcessDescriptor]:
    """Validate the enumerate response; order is left as the server sent it."""
    if not isinstance(payload, list):
        raise MalformedResponseError(f"Process list must be a JSON array, got {type(payload).__name__}", path=ENUM_PROCESS_PATH)
    return [parse_process_entry(entry, index) for index, entry in enumerate(payload)]


__all__ = [
    "ENUM_PROCESS_PATH",
    "SERVER_INFO_PATH",
    "parse_process_entry",
    "parse_process_list",
    "parse_server_info",
]
