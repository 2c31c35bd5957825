"""Internal API package for the ATAG One integration.

This package wraps the external ``atag-one.jar`` command line client.
:mod:`client` holds :class:`~custom_components.atag_one.api.client.AtagOneClient`,
which builds the command line, runs the process and hands its output to
the extractor.  :mod:`parameters` describes the fields of the JSON
report.  The client module is imported directly by its users so that
loading the field definitions stays free of import cycles.
"""

from .parameters import FLAME, REPORT  # noqa: F401

__all__ = [
    "FLAME",
    "REPORT",
]
