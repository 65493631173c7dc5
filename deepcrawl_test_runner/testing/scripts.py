"""Stand-in CLI executables for tests."""

import sys


def fake_cli_source(body: str) -> bytes:
    """Return a Python script that runs ``body`` with ``sys`` imported.

    The shebang points at the current interpreter, so the bytes can be
    served as a download and launched directly on POSIX hosts.
    """
    return f"#!{sys.executable}\nimport sys\n{body}\n".encode()
