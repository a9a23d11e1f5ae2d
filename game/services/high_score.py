"""
High score persistence.

The high score is stored as a single decimal integer in a plain text file.
"""

import logging
import os
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Loads and saves the high score.

    A missing file means a high score of 0. A file with anything other than
    a non-negative integer is reported and also read as 0; it is left alone
    until a new high score replaces it.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> int:
        if not self.path.exists():
            logger.info(f"No high score file at {self.path}, starting from 0")
            return 0

        try:
            text = self.path.read_text(encoding="utf-8").strip()
            value = int(text)
        except ValueError as e:
            # UnicodeDecodeError is a ValueError too
            logger.warning(f"Ignoring unreadable high score file {self.path}: {e}")
            return 0

        if value < 0:
            logger.warning(f"Ignoring negative high score {value} in {self.path}")
            return 0

        logger.info(f"Loaded high score {value} from {self.path}")
        return value

    def save(self, score: int) -> None:
        """Overwrite the file with the given score."""
        if score < 0:
            raise ValueError(f"High score cannot be negative: {score}")

        if self.path.parent and not self.path.parent.exists():
            os.makedirs(self.path.parent, exist_ok=True)

        # Write beside the target and swap in; readers never see a partial file
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(str(score), encoding="utf-8")
        os.replace(tmp_path, self.path)
        logger.info(f"Saved high score {score} to {self.path}")
