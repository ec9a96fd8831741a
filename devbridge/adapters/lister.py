"""
Local file enumerator
"""
import glob
import os
from typing import List

from ..core.exceptions import EnumerationError
from ..core.interfaces import FileLister
from ..core.logging import get_logger

logger = get_logger(__name__)


class GlobFileLister(FileLister):
    """Glob-based local file lister (supports ** and ~)"""

    def __init__(self, require_match: bool = False):
        """
        Args:
            require_match: Raise EnumerationError when nothing matches
        """
        self.require_match = require_match

    def list(self, pattern: str) -> List[str]:
        """
        Return files matching pattern, sorted.

        Directories are left out since only files can be pushed.

        Raises:
            EnumerationError: If matching fails, or nothing matches and
                require_match is set
        """
        expanded = os.path.expanduser(pattern)
        try:
            matches = glob.glob(expanded, recursive=True)
        except (OSError, ValueError) as e:
            raise EnumerationError(f"Failed to list local files for {pattern}: {e}") from e

        files = sorted(path for path in matches if os.path.isfile(path))
        if not files and self.require_match:
            raise EnumerationError(f"No local files match {pattern}")

        logger.debug(f"[glob] {pattern}: {len(files)} file(s)")
        return files
