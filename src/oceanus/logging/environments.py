"""Runtime environment detection."""

import os

BATCH_SCHEDULER_VARIABLES = ("OAR_JOB_ID", "SLURM_JOB_ID", "PBS_JOBID")
PLAIN_LOGS_VARIABLE = "OCEANUS_PLAIN_LOGS"


def in_notebook() -> bool:
    """Detect if code is run within a jupyter notebook.

    Returns:
        bool: True if run within a Jupyter notebook.
    """
    try:
        from IPython import get_ipython  # noqa: PLC0415
    except ImportError:
        return False
    return get_ipython() is not None


def in_batch_job() -> bool:
    """Detect if code is run by a batch scheduler (OAR, Slurm or PBS).

    Returns:
        bool: True if one of the scheduler job variables is set.
    """
    return any(var in os.environ for var in BATCH_SCHEDULER_VARIABLES)


def plain_logs_requested() -> bool:
    """Whether plain (uncoloured) logs were explicitly requested.

    Returns:
        bool: True if OCEANUS_PLAIN_LOGS is set to a truthy value.
    """
    value = os.environ.get(PLAIN_LOGS_VARIABLE, "")
    return value.lower() in ("1", "true", "yes", "on")
