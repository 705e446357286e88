# seedsync/data_models/failure_types.py
# Failure type registry and exit code mapping.

# ---------------------------------------------------------------------------
# FAILURE TYPE REGISTRY
# ---------------------------------------------------------------------------
# Exit code mapping:
#   Code 0 -- all constants synchronized (not a failure, listed for reference)
#   Code 1 -- CONSTANT_MISMATCH, CONSTANT_MISSING
#   Code 2 -- READ_FAILURE (source file missing, unreadable or undecodable)
#   Code 3 -- CONFIG_VIOLATION (bad CLI arguments or SyncConfig)
#   Code 4 -- Internal checker errors
#
# Hard failures are raised as RuntimeError whose message starts with the
# failure type id followed by ':'.

FAILURE_TYPES = {
    # Exit Code 1
    "CONSTANT_MISMATCH":    1,
    "CONSTANT_MISSING":     1,
    # Exit Code 2
    "READ_FAILURE":         2,
    # Exit Code 3
    "CONFIG_VIOLATION":     3,
    # Exit Code 4
    "CHECK_INTERNAL_ERROR": 4,
}


def exit_code_for(exc: BaseException) -> int:
    """
    Map an exception to an exit code via its failure type prefix.
    Messages without a known prefix map to CHECK_INTERNAL_ERROR.
    """
    msg = str(exc)
    for failure_type_id, code in FAILURE_TYPES.items():
        if msg.startswith(failure_type_id + ":"):
            return code
    return FAILURE_TYPES["CHECK_INTERNAL_ERROR"]
