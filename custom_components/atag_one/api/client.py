"""Asynchronous client for the ATAG One command line tool.

This module defines :class:`AtagOneClient`, a thin wrapper around the
``atag-one.jar`` program published by the atag-one-api project.  The
program talks to the thermostat either over the local network or via
the ATAG portal and prints a JSON report as the last thing on its
standard output.

The client does not understand the thermostat protocol itself.  It
builds the command line for the configured mode, runs the process
without blocking the event loop and returns its output.  Decoding the
report is left to :func:`~custom_components.atag_one.utils.extract_json`.

Usage example::

    client = AtagOneClient("/config/atag-one/atag-one.jar", host="192.168.1.50")
    report = await client.async_read()
    await client.async_set_temperature(20.5)

"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

from ..const import (
    DEFAULT_JAVA_PATH,
    DEFAULT_TIMEOUT,
    MODE_LOCAL,
    MODE_REMOTE,
)
from ..exceptions import (
    AtagOneCommandError,
    AtagOneConfigError,
    AtagOneConnectionError,
    AtagOneParseError,
    AtagOneTimeoutError,
)
from ..utils import extract_json, mask_args

_LOGGER = logging.getLogger(__name__)


class AtagOneClient:
    """Runs ``atag-one.jar`` for a single thermostat.

    Parameters
    ----------
    jar_path: str
        Location of ``atag-one.jar``.
    mode: str
        ``"local"`` to talk to the thermostat on the LAN, ``"remote"``
        to go through the ATAG portal.
    host: str, optional
        Address of the thermostat, required in local mode.
    email, password: str, optional
        Portal credentials, required in remote mode.
    java_path: str
        Java executable used to run the jar.
    timeout: float
        Seconds after which a running process is killed.
    """

    def __init__(
        self,
        jar_path: str,
        *,
        mode: str = MODE_LOCAL,
        host: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        java_path: str = DEFAULT_JAVA_PATH,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if mode not in (MODE_LOCAL, MODE_REMOTE):
            raise AtagOneConfigError(f"Unknown mode: {mode}")
        self.jar_path: str = jar_path
        self.mode: str = mode
        self.host: Optional[str] = host
        self.email: Optional[str] = email
        self.password: Optional[str] = password
        self.java_path: str = java_path
        self.timeout: float = timeout

    def build_args(self, set_temperature: Optional[float] = None) -> List[str]:
        """Return the arguments passed to the Java executable."""
        args = ["-jar", self.jar_path]
        if self.mode == MODE_LOCAL:
            args += ["-d", str(self.host)]
        else:
            args += ["-r", "-e", str(self.email), "-p", str(self.password)]
        if set_temperature is not None:
            args += ["-t", str(set_temperature)]
        return args

    async def async_execute(self, set_temperature: Optional[float] = None) -> str:
        """Run the client and return its standard output.

        Raises
        ------
        AtagOneConnectionError
            If the process cannot be started.
        AtagOneTimeoutError
            If the process does not finish within :attr:`timeout`.
        AtagOneCommandError
            If the process exits with a non-zero code.
        """
        args = self.build_args(set_temperature)
        _LOGGER.debug(
            "Executing: %s %s", self.java_path, " ".join(mask_args(args))
        )
        try:
            process = await asyncio.create_subprocess_exec(
                self.java_path,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as err:
            raise AtagOneConnectionError(
                f"Failed to execute command: {err}"
            ) from err

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.timeout
            )
        except asyncio.TimeoutError as err:
            self._kill(process)
            await process.wait()
            raise AtagOneTimeoutError(
                f"Command timed out after {self.timeout} seconds"
            ) from err
        finally:
            # Cancelled polls (unload, shutdown) must not leave java running.
            if process.returncode is None:
                self._kill(process)

        if process.returncode != 0:
            raise AtagOneCommandError(
                process.returncode, stderr.decode(errors="replace").strip()
            )
        return stdout.decode(errors="replace")

    @staticmethod
    def _kill(process: asyncio.subprocess.Process) -> None:
        try:
            process.kill()
        except ProcessLookupError:
            pass

    async def async_read(self) -> Dict[str, Any]:
        """Read the thermostat report as a dictionary."""
        output = await self.async_execute()
        try:
            return extract_json(output)
        except AtagOneParseError:
            _LOGGER.debug("Raw output: %s", output)
            raise

    async def async_set_temperature(self, temperature: float) -> str:
        """Ask the thermostat to use ``temperature`` as its setpoint."""
        return await self.async_execute(set_temperature=temperature)
