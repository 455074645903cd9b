# This file is part of notitlebar.
# Copyright (C) 2026 The notitlebar developers
# notitlebar is released under the terms of the GNU GPL v2, or, at your option, any
# later version. See the file COPYING for details.

import os
from subprocess import Popen, DEVNULL, TimeoutExpired
from typing import Any

from notitlebar.util.io import get_status_output, which
from notitlebar.x11.motif_hints import MotifWMHints, MOTIF_WM_HINTS, MOTIF_WM_HINTS_FORMAT, decode, encode
from notitlebar.log import Logger

log = Logger("x11", "exec")

XPROP_COMMAND = os.environ.get("NOTITLEBAR_XPROP", "xprop")

FORMAT_ARGS = ["-f", MOTIF_WM_HINTS, MOTIF_WM_HINTS_FORMAT]


class XPropGateway:
    """
    Reads and writes the `_MOTIF_WM_HINTS` property of X11 windows
    by running the `xprop` command.
    Reads are synchronous, writes are not waited for.
    """

    def __init__(self, command: str = ""):
        self.command = command or XPROP_COMMAND
        self.processes: list[Popen] = []
        self.read_count = 0
        self.write_count = 0

    def __repr__(self):
        return f"XPropGateway({self.command!r})"

    def is_available(self) -> bool:
        if os.path.isabs(self.command):
            return os.access(self.command, os.X_OK)
        return bool(which(self.command))

    def read_command(self, xid: str) -> list[str]:
        return [self.command, "-id", xid, *FORMAT_ARGS, "-notype", MOTIF_WM_HINTS]

    def write_command(self, xid: str, hints: MotifWMHints) -> list[str]:
        return [self.command, "-id", xid, *FORMAT_ARGS, "-set", MOTIF_WM_HINTS, encode(hints)]

    def read(self, xid: str) -> MotifWMHints | None:
        log.info(f"reading {MOTIF_WM_HINTS} for {xid}")
        self.read_count += 1
        cmd = self.read_command(xid)
        try:
            returncode, stdout, stderr = get_status_output(cmd)
        except UnicodeDecodeError as e:
            log("failed to read %s for %s: %s", MOTIF_WM_HINTS, xid, e)
            return None
        log("%s returned %i, stdout=%r, stderr=%r", cmd, returncode, stdout, stderr)
        if returncode != 0:
            log("failed to read %s for %s: exit code %i", MOTIF_WM_HINTS, xid, returncode)
            return None
        hints = decode(stdout or "")
        log("read(%s)=%s", xid, hints)
        return hints

    def write(self, xid: str, hints: MotifWMHints) -> bool:
        log.info(f"updating {MOTIF_WM_HINTS} of {xid} to {encode(hints)!r}")
        self.reap()
        self.write_count += 1
        cmd = self.write_command(xid, hints)
        try:
            proc = Popen(cmd, stdin=DEVNULL, stdout=DEVNULL, stderr=DEVNULL)
        except OSError as e:
            log("Popen(%s)", cmd, exc_info=True)
            log.warn(f"Warning: failed to update {MOTIF_WM_HINTS} of {xid}")
            log.warn(f" {e}")
            return False
        self.processes.append(proc)
        return True

    def reap(self) -> int:
        """
        Forgets about the write processes that have terminated,
        returns the number of processes still running.
        """
        running = []
        for proc in self.processes:
            returncode = proc.poll()
            if returncode is None:
                running.append(proc)
            elif returncode != 0:
                log("%s terminated with exit code %i", proc.args, returncode)
        self.processes = running
        return len(running)

    def cleanup(self, timeout: float = 1) -> None:
        for proc in self.processes:
            try:
                proc.wait(timeout)
            except TimeoutExpired:
                log.warn(f"Warning: {proc.args[0]!r} process {proc.pid} is still running")
        self.reap()

    def get_info(self) -> dict[str, Any]:
        return {
            "command": self.command,
            "reads": self.read_count,
            "writes": self.write_count,
            "running": len(self.processes),
        }
