import logging
from typing import Callable

log = logging.getLogger(__name__)

# (existing_count, threshold) -> proceed?
Confirm = Callable[[int, int], bool]

def confirm_reseed(existing_count: int, threshold: int, ask: Callable[[str], str] = input) -> bool:
    """Ask on the terminal whether to wipe and reseed. Only "y" proceeds."""
    log.warning("Dictionary contains %d words (threshold: %d)", existing_count, threshold)
    log.warning("This suggests the database may need cleaning up.")
    try:
        answer = ask("Clear and reseed? (y/N): ")
    except EOFError:
        return False
    return answer.lower() == "y"

def always_yes(existing_count: int, threshold: int) -> bool:
    return True
