# highscore.py - Score Persistence Module
"""
Handles saving and loading of the high score to/from file.
The file holds a single integer as text.
"""

from config import HIGHSCORE_FILE  # Path to score file: "~/.tflap_highscore"
from logger import get_logger

log = get_logger("highscore")


def load_high_score(path: str = HIGHSCORE_FILE) -> int:
    """
    Load the high score from file.
    Returns:
        int: The saved high score, or 0 if the file is missing or corrupted.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            val = int(f.read().strip())  # Read, strip whitespace, convert to int
            return max(0, val)  # Ensure non-negative score
    except FileNotFoundError:
        return 0  # First run
    except (OSError, ValueError) as exc:
        log.warning("could not read high score from %s: %s", path, exc)
        return 0


def save_high_score(value: int, path: str = HIGHSCORE_FILE) -> bool:
    """
    Save a new high score to file, overwriting the previous one.
    Args:
        value (int): The score to save (negative values saved as 0)
    Returns:
        bool: True if the value reached the file.
    """
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(str(max(0, int(value))))
    except OSError as exc:
        log.warning("could not save high score %d to %s: %s", value, path, exc)
        return False
    return True
