"""
Exit codes for focustimer.

The timer exits with SUCCESS whether the countdown elapsed or was interrupted.
"""

# Success (elapsed or interrupted)
SUCCESS = 0

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    }
    return code_names.get(code, f"UNKNOWN({code})")
