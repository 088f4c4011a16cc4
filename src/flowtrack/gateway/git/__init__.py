"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and dry-run via wrappers.
"""

from flowtrack.gateway.git.abc import Git
from flowtrack.gateway.git.dry_run import DryRunGit
from flowtrack.gateway.git.printing import PrintingGit
from flowtrack.gateway.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
    "DryRunGit",
    "PrintingGit",
]
