"""Git branch lookup for the status line.

Every failure (git missing, not a repository, unborn or detached HEAD with
no name) just means there is no branch to show.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

# symbolic-ref works on a branch with no commits yet; rev-parse covers detached HEAD
BRANCH_COMMANDS = (
    ["symbolic-ref", "--short", "HEAD"],
    ["rev-parse", "--abbrev-ref", "HEAD"],
)


def run_git(
    args: list[str],
    cwd: Union[str, Path],
) -> Optional[subprocess.CompletedProcess]:
    """Run a git command with stderr discarded.

    Args:
        args: Git command arguments (without 'git' prefix).
        cwd: Working directory for the command.

    Returns:
        CompletedProcess instance, or None if git could not be started
        (not installed, or cwd does not exist).
    """
    cmd = ["git"] + args
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
        )
    except (OSError, ValueError) as e:
        logger.debug(f"git {args[0]} could not run: {e}")
        return None


def get_git_branch(directory: Union[str, Path]) -> Optional[str]:
    """Get the current branch of the repository containing a directory.

    Args:
        directory: Directory to run git in.

    Returns:
        Branch name, or None if it cannot be determined.
    """
    logger.debug(f"get_git_branch: dir={directory}")

    for args in BRANCH_COMMANDS:
        logger.debug(f"git {args[0]} start")
        result = run_git(args, cwd=directory)
        logger.debug(f"git {args[0]} done")

        if result is None:
            return None
        if result.returncode == 0:
            branch = result.stdout.strip()
            if branch:
                return branch

    return None
