"""Launch the CLI and relay its output to the job log."""

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from deepcrawl_test_runner.errors import LaunchError, StreamReadError, ToolExitError
from deepcrawl_test_runner.hosts.base import Host
from deepcrawl_test_runner.models.result import ProcessResult

log = logging.getLogger(__name__)

# Longest line a relay accepts before giving up on its stream
LINE_LIMIT = 1024 * 1024
DISCARD_CHUNK_SIZE = 64 * 1024


async def run_process(
    command: Sequence[str],
    cwd: Path,
    host: Host,
    *,
    executable: Path | None = None,
) -> ProcessResult:
    """Run ``command`` in ``cwd`` and stream its output to ``host``.

    Standard output and standard error are relayed by two independent tasks.
    Lines keep their order within a stream; there is no ordering across
    streams. If the wait ends abnormally (cancellation or any other
    exception) the child is killed before the exception propagates.

    Args:
        command: Argument vector, executable first
        cwd: Working directory the executable path is relative to
        host: Host whose log receives every output line
        executable: Explicit program to start, for hosts that do not resolve
            a relative ``command[0]`` against ``cwd``. It replaces
            ``command[0]`` entirely, so the child sees this path as its
            ``argv[0]`` rather than the relative name; Windows runs rely on it

    Returns:
        Process result with exit code 0

    Raises:
        LaunchError: If the process cannot be started
        ToolExitError: If the process exits with a non-zero code

    """
    program = str(executable) if executable is not None else command[0]
    try:
        process = await asyncio.create_subprocess_exec(
            program,
            *command[1:],
            cwd=cwd,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            limit=LINE_LIMIT,
        )
    except OSError as e:
        raise LaunchError(f"Failed to launch {command[0]}: {e}") from e

    log.info("Started %s (pid=%d)", command[0], process.pid)
    assert process.stdout is not None
    assert process.stderr is not None

    try:
        _, _, exit_code = await asyncio.gather(
            relay_stream(process.stdout, host, "stdout"),
            relay_stream(process.stderr, host, "stderr"),
            process.wait(),
        )
    except BaseException:
        log.warning("Stopped waiting for pid=%d", process.pid)
        terminate(process)
        raise

    log.info("Process pid=%d exited with code %d", process.pid, exit_code)
    if exit_code != 0:
        raise ToolExitError(exit_code)

    return ProcessResult(exit_code=exit_code)


async def relay_stream(stream: asyncio.StreamReader, host: Host, name: str) -> None:
    """Forward each line of ``stream`` to the host log until EOF.

    Only cancellation escapes. A failure reading the stream or writing to the log is
    reported and ends the relay, and the rest of the stream is still consumed
    so the child never blocks on a full pipe.
    """
    try:
        while line := await stream.readline():
            host.log(decode_line(line))
    except Exception as e:
        error = StreamReadError(f"Error relaying {name}: {e}")
        log.warning("%s", error)
        try:
            host.log(str(error))
        except Exception as log_error:
            log.warning("Job log unavailable for %s: %s", name, log_error)
        await discard_stream(stream, name)


async def discard_stream(stream: asyncio.StreamReader, name: str) -> None:
    """Read and drop whatever is left on ``stream``."""
    try:
        while await stream.read(DISCARD_CHUNK_SIZE):
            pass
    except Exception as e:
        log.debug("Stopped draining %s: %s", name, e)


def decode_line(line: bytes) -> str:
    """Decode one output line as UTF-8 without its line terminator."""
    return line.decode("utf-8", errors="replace").rstrip("\r\n")


def terminate(process: asyncio.subprocess.Process) -> None:
    """Kill ``process`` if it is still running."""
    if process.returncode is not None:
        return
    try:
        process.kill()
    except ProcessLookupError:
        log.debug("Process pid=%d already gone", process.pid)
