from __future__ import annotations
import logging
import os
import subprocess
import ghrepo
from .errors import SubprocessError

log = logging.getLogger(__name__)


def get_current_branch(dirpath: str | os.PathLike[str] | None = None) -> str:
    """
    Return the name of the branch checked out in the Git repository at or
    containing ``dirpath`` (default: the current directory)

    :raises SubprocessError: if Git could not be run, failed, or HEAD is
        detached
    """
    try:
        branch = ghrepo.get_current_branch(dirpath)
    except subprocess.CalledProcessError as e:
        raise SubprocessError(
            f"git exited with status {e.returncode} while looking up the"
            " current branch"
        ) from e
    except (OSError, subprocess.SubprocessError) as e:
        raise SubprocessError(f"Could not run git: {e}") from e
    except ghrepo.DetachedHeadError as e:
        raise SubprocessError(
            "Could not determine current branch: HEAD is detached"
        ) from e
    branch = branch.strip()
    log.debug("Current branch: %s", branch)
    return branch
