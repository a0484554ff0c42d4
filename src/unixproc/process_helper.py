"""Instance facade over the module-level process functions.

Depend on a :class:`ProcessHelper` instead of the functions when the calling
code needs to swap in a mock during its own tests.
"""

from __future__ import annotations

from os import PathLike
from typing import List, Optional, Sequence, Union

import psutil

from . import pgrep_capability, process_killer, process_launcher, process_query, process_tree, process_utils
from .kill_signal import KillSignal
from .process_killer_helpers import TimeoutAction
from .process_query_helpers import ProcessMatch


class ProcessHelper:
    """Launch, find and kill processes through one injectable object."""

    def launch(self, command: Sequence[str], working_directory: Union[str, PathLike, None] = None) -> psutil.Popen:
        return process_launcher.launch(command, working_directory)

    def wait_for_exit(self, handle: psutil.Popen, timeout: float) -> Optional[int]:
        return process_launcher.wait_for_exit(handle, timeout)

    def forcibly_kill(self, handle: psutil.Popen, timeout: float) -> bool:
        return process_launcher.forcibly_kill(handle, timeout)

    def process_id(self, handle: psutil.Popen) -> int:
        return process_utils.process_id(handle)

    def kill(
        self,
        pid: int,
        signal: KillSignal | str | int,
        action: TimeoutAction,
        timeout: float = process_killer.DEFAULT_KILL_TIMEOUT_SECONDS,
    ) -> int:
        return process_killer.kill(pid, signal, action, timeout)

    def find_pids(self, user: Optional[str], pattern: str) -> List[int]:
        return process_query.find_pids(user, pattern)

    def find_pids_with_command(self, user: Optional[str], pattern: str) -> List[ProcessMatch]:
        return process_query.find_pids_with_command(user, pattern)

    def find_single_pid(self, user: Optional[str], pattern: str) -> Optional[int]:
        return process_query.find_single_pid(user, pattern)

    def find_child_pids(self, parent_pid: int) -> List[int]:
        return process_tree.find_child_pids(parent_pid)

    def find_single_child_pid(self, parent_pid: int) -> Optional[int]:
        return process_tree.find_single_child_pid(parent_pid)

    def pgrep_flags(self) -> str:
        return pgrep_capability.get_pgrep_flags()

    def was_pgrep_flags_check_successful(self) -> bool:
        return pgrep_capability.was_pgrep_flags_check_successful()


__all__ = ["ProcessHelper"]
