# vuze_client/protocol/request.py
"""Request builder for the XML over HTTP plugin.

The plugin reads requests positionally rather than validating them against a
schema, so element order matters and must not change.
"""

import re

# Same notion of "numeric" the plugin's reference clients use:
# optional whitespace and sign, ASCII decimal digits, optional fraction and exponent.
RE_NUMERIC = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$", re.ASCII)

Parameter = str | int | float | bool


def is_numeric(value: str) -> bool:
    """Return True if the plugin would treat ``value`` as an object reference."""
    return RE_NUMERIC.match(value) is not None


def format_parameter(parameter: Parameter) -> str:
    """Render a parameter value as request text."""
    if isinstance(parameter, bool):
        return "true" if parameter else "false"
    return str(parameter)


def object_reference(object_id: str) -> str:
    """Wrap an object id in an OBJECT block."""
    return f"<OBJECT><_object_id>{object_id}</_object_id></OBJECT>"


def build_request(
    method: str,
    request_id: int,
    object_id: str | None = None,
    parameter: Parameter | None = None,
    connection_id: str | None = None,
) -> str:
    """Assemble a request document.

    Args:
        method: Remote method name, e.g. ``getDownloads``.
        request_id: Session-issued correlation number.
        object_id: Target object. Only sent once a connection id exists.
        parameter: Optional single parameter. Numeric values are always sent
            as object references; anything else is inserted verbatim, which
            lets callers pass pre-built fragments.
        connection_id: The session's connection id, if the handshake has run.

    Returns:
        str: The complete ``<REQUEST>`` document.
    """
    parts = [f"<METHOD>{method}</METHOD>"]

    if object_id and connection_id:
        parts.append(object_reference(object_id))
        parts.append(f"<CONNECTION_ID>{connection_id}</CONNECTION_ID>")

    parts.append(f"<REQUEST_ID>{request_id}</REQUEST_ID>")

    if parameter is not None:
        value = format_parameter(parameter)
        entry = object_reference(value) if is_numeric(value) else value
        parts.append(f"<PARAMS><ENTRY>{entry}</ENTRY></PARAMS>")

    return "<REQUEST>" + "".join(parts) + "</REQUEST>"
