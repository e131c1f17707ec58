
import logging, shutil, socket, subprocess, sys
from typing import List, Tuple

from errors import ExecutionError, ResolutionError

logger = logging.getLogger(__name__)

# added on top of every probe's own time budget before the process is killed
TIMEOUT_MARGIN = 5.0


def os_family(platform: str = sys.platform) -> str:
    """'linux', 'darwin', 'freebsd14' -> 'freebsd', ..."""
    return platform.rstrip("0123456789").lower()


def resolve_host(host: str):
    try:
        socket.getaddrinfo(host, None)
    except (socket.gaierror, UnicodeError) as e:
        raise ResolutionError(f"lookup {host}: {e}") from e


def run_command(binary: str, args: List[str], timeout: float, margin: float = TIMEOUT_MARGIN) -> Tuple[str, int]:
    """
    Run binary with args, stdout and stderr merged.
    Returns (output, returncode); the process is killed after timeout + margin seconds.
    """
    path = shutil.which(binary)
    if path is None:
        raise ExecutionError(f"exec: {binary!r}: executable file not found in $PATH")
    limit = timeout + margin
    logger.debug("running %s %s (limit %.1fs)", path, " ".join(args), limit)
    try:
        cp = subprocess.run(
            [path, *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            timeout=limit,
        )
    except subprocess.TimeoutExpired as e:
        raise ExecutionError(f"command timed out after {limit:g}s") from e
    except OSError as e:
        raise ExecutionError(f"exec: {binary!r}: {e}") from e
    return cp.stdout or "", cp.returncode
