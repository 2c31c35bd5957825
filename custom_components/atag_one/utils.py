"""Common helper functions for the ATAG One integration.

This module extracts the JSON report from the free-form text printed by
the ``atag-one.jar`` client and copies the known fields onto an
:class:`~custom_components.atag_one.models.AtagOneSnapshot`.  The client
prints log lines first and finishes with a single JSON object, so the
helpers only look at the object anchored at the end of the output.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Sequence

from .api.parameters import FLAME, REPORT
from .const import FLAME_STATUS_OFF, HEATING_HYSTERESIS
from .exceptions import AtagOneParseError
from .models import AtagOneSnapshot

_LOGGER = logging.getLogger(__name__)

# Last brace-delimited object at the end of the output, allowing one
# level of nested objects inside it.
JSON_PATTERN = re.compile(r"(\{[^{}]*(?:\{[^{}]*\}[^{}]*)*\})\s*$", re.DOTALL)

_MASKED = "******"


def extract_json(output: str) -> Dict[str, Any]:
    """Return the JSON object that terminates ``output``.

    Parameters
    ----------
    output: str
        The complete standard output of the client process.

    Returns
    -------
    dict
        The decoded object.

    Raises
    ------
    AtagOneParseError
        If no object is found at the end of the output, if it is not
        valid JSON or if it does not decode to an object.
    """
    match = JSON_PATTERN.search(output or "")
    if match is None:
        raise AtagOneParseError("No JSON data found in output")
    try:
        data = json.loads(match.group(1))
    except ValueError as err:
        raise AtagOneParseError(f"Invalid JSON data in output: {err}") from err
    if not isinstance(data, dict):
        raise AtagOneParseError("JSON data in output is not an object")
    return data


def apply_report(snapshot: AtagOneSnapshot, data: Dict[str, Any]) -> List[str]:
    """Copy the known fields present in ``data`` onto ``snapshot``.

    Fields missing from ``data`` leave the snapshot untouched and unknown
    fields are ignored.  The heating state is only recomputed when the
    report carries a flame status.  Values are converted before any
    attribute is written so a bad value leaves the snapshot unchanged.

    Returns the names of the attributes that were written.
    """
    updates: Dict[str, Any] = {}
    for field, definition in REPORT.items():
        if field not in data:
            continue
        try:
            updates[definition["attr"]] = definition["type"](data[field])
        except (TypeError, ValueError) as err:
            raise AtagOneParseError(
                f"Invalid value for {field}: {data[field]!r}"
            ) from err

    for field, definition in FLAME.items():
        if field not in data:
            continue
        flame_active = definition["type"](data[field]) != FLAME_STATUS_OFF
        updates[definition["attr"]] = flame_active
        current = updates.get("current_temperature", snapshot.current_temperature)
        target = updates.get("target_temperature", snapshot.target_temperature)
        updates["heating"] = flame_active or current < target - HEATING_HYSTERESIS

    for attr, value in updates.items():
        setattr(snapshot, attr, value)

    _LOGGER.debug(
        "Updated data - Current: %s°C, Target: %s°C, Heating: %s",
        snapshot.current_temperature,
        snapshot.target_temperature,
        snapshot.heating,
    )
    return list(updates)


def mask_args(args: Sequence[str]) -> List[str]:
    """Return a copy of ``args`` with the value after ``-p`` masked."""
    masked: List[str] = []
    hide_next = False
    for arg in args:
        masked.append(_MASKED if hide_next else arg)
        hide_next = arg == "-p"
    return masked
