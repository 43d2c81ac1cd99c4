import logging
from typing import Any, Iterable, List, MutableMapping

logger = logging.getLogger(__name__)

FORM_SESSION_KEYS = ("storyboard_controller", "model_controller", "concept_art_preview")


def reset_session(session_state: MutableMapping[str, Any], keys: Iterable[str] = FORM_SESSION_KEYS) -> List[str]:
    """Tear down per-session form objects and drop them from the session.

    Controllers discard any response still in flight; preview slots delete
    their files.

    Returns:
        The keys that were torn down
    """
    removed = []
    for key in keys:
        if key not in session_state:
            continue
        session_state[key].close()
        del session_state[key]
        removed.append(key)
    logger.info(f"Reset session objects: {removed}")
    return removed
