"""Pure traversal functions over raw document fragments.

These functions work on plain dicts and lists only and return ordered
``(key, fragment)`` pairs; entity construction and de-duplication happen
in the callers.  Channel association is decided by object identity: a
channel belongs to an operation when its ``publish`` or ``subscribe``
value *is* the operation fragment.
"""

from __future__ import annotations

from typing import Any

from src.asyncapi_model.base import join_pointer, report_malformed
from src.shared.constants import OPERATION_ACTIONS


def _section(parsed: dict[str, Any] | None, name: str, strict: bool) -> dict[str, Any]:
    """Return a top-level mapping section, or ``{}`` when absent or malformed."""
    if parsed is None:
        return {}
    section = parsed.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        report_malformed(f"'{name}' is not an object", join_pointer("", name), strict)
        return {}
    return section


def servers_section(parsed: dict[str, Any] | None, strict: bool = False) -> dict[str, Any]:
    return _section(parsed, "servers", strict)


def channels_section(parsed: dict[str, Any] | None, strict: bool = False) -> dict[str, Any]:
    return _section(parsed, "channels", strict)


# ---------------------------------------------------------------------------
# Channels
# ---------------------------------------------------------------------------


def associated_channels(
    parsed: dict[str, Any] | None,
    operation: Any,
    strict: bool = False,
) -> list[tuple[str, dict[str, Any]]]:
    """Channels whose ``publish`` or ``subscribe`` is *operation*, in declaration order."""
    if not isinstance(operation, dict):
        return []

    result: list[tuple[str, dict[str, Any]]] = []
    for address, channel in channels_section(parsed, strict).items():
        if not isinstance(channel, dict):
            report_malformed(
                "channel is not an object", join_pointer("", "channels", str(address)), strict
            )
            continue
        if any(channel.get(action) is operation for action in OPERATION_ACTIONS):
            result.append((str(address), channel))
    return result


def channel_operations(channel: Any) -> list[tuple[str, dict[str, Any]]]:
    """The ``(action, fragment)`` pairs a channel declares, publish first."""
    if not isinstance(channel, dict):
        return []
    return [
        (action, channel[action])
        for action in OPERATION_ACTIONS
        if isinstance(channel.get(action), dict)
    ]


# ---------------------------------------------------------------------------
# Servers
# ---------------------------------------------------------------------------


def _server_restriction(
    address: str,
    channel: dict[str, Any],
    strict: bool,
) -> list[str] | None:
    """Return the channel's server name list, or ``None`` when unrestricted.

    An empty list means unrestricted as well.
    """
    restriction = channel.get("servers")
    if restriction is None:
        return None
    if not isinstance(restriction, list):
        report_malformed(
            "'servers' restriction is not a list",
            join_pointer("", "channels", address, "servers"),
            strict,
        )
        return None
    if not restriction:
        return None
    return [str(name) for name in restriction]


def reachable_servers(
    parsed: dict[str, Any] | None,
    address: str,
    channel: Any,
    strict: bool = False,
) -> list[tuple[str, Any]]:
    """Servers *channel* may be served from, in ``servers`` declaration order."""
    if not isinstance(channel, dict):
        return []
    servers = servers_section(parsed, strict)
    if not servers:
        return []
    restriction = _server_restriction(address, channel, strict)
    return [
        (str(name), server)
        for name, server in servers.items()
        if restriction is None or str(name) in restriction
    ]


def operation_servers(
    parsed: dict[str, Any] | None,
    operation: Any,
    strict: bool = False,
) -> list[tuple[str, Any]]:
    """Servers reachable through every channel of *operation*.

    Ordered by first reachability; repeated names are kept so the caller's
    collection decides which occurrence wins.
    """
    result: list[tuple[str, Any]] = []
    for address, channel in associated_channels(parsed, operation, strict):
        result.extend(reachable_servers(parsed, address, channel, strict))
    return result


def server_channels(
    parsed: dict[str, Any] | None,
    server_name: str,
    strict: bool = False,
) -> list[tuple[str, dict[str, Any]]]:
    """Channels that can be served from *server_name*, in declaration order."""
    if server_name not in servers_section(parsed, strict):
        return []

    result: list[tuple[str, dict[str, Any]]] = []
    for address, channel in channels_section(parsed, strict).items():
        if not isinstance(channel, dict):
            report_malformed(
                "channel is not an object", join_pointer("", "channels", str(address)), strict
            )
            continue
        names = [name for name, _ in reachable_servers(parsed, str(address), channel, strict)]
        if server_name in names:
            result.append((str(address), channel))
    return result


# ---------------------------------------------------------------------------
# Messages and traits
# ---------------------------------------------------------------------------


def flatten_messages(
    operation: Any,
    pointer: str = "",
    strict: bool = False,
) -> list[tuple[str, dict[str, Any]]]:
    """Flatten an operation's ``message`` field into ``(pointer, fragment)`` pairs.

    * absent -> ``[]``
    * ``{"oneOf": [...]}`` -> one pair per element, in list order
    * any other mapping -> the mapping itself

    A ``message`` that is not a mapping, a ``oneOf`` that is not a list, or
    a ``oneOf`` element that is not a mapping makes the whole field count
    as absent.
    """
    if not isinstance(operation, dict):
        return []
    message = operation.get("message")
    if message is None:
        return []

    message_pointer = join_pointer(pointer, "message")
    if not isinstance(message, dict):
        report_malformed("'message' is not an object", message_pointer, strict)
        return []

    if "oneOf" not in message:
        return [(message_pointer, message)]

    one_of = message["oneOf"]
    one_of_pointer = join_pointer(message_pointer, "oneOf")
    if not isinstance(one_of, list):
        report_malformed("'message.oneOf' is not a list", one_of_pointer, strict)
        return []
    if not all(isinstance(item, dict) for item in one_of):
        report_malformed("'message.oneOf' holds a non-object entry", one_of_pointer, strict)
        return []
    return [(join_pointer(one_of_pointer, index), item) for index, item in enumerate(one_of)]


def operation_traits(
    operation: Any,
    pointer: str = "",
    strict: bool = False,
) -> list[tuple[str, dict[str, Any]]]:
    """Return the ``traits`` list as ``(pointer, fragment)`` pairs in list order."""
    if not isinstance(operation, dict):
        return []
    traits = operation.get("traits")
    if traits is None:
        return []

    traits_pointer = join_pointer(pointer, "traits")
    if not isinstance(traits, list) or not all(isinstance(t, dict) for t in traits):
        report_malformed("'traits' is not a list of objects", traits_pointer, strict)
        return []
    return [(join_pointer(traits_pointer, index), trait) for index, trait in enumerate(traits)]
