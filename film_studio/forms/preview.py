import logging
import os
import tempfile
import weakref
from typing import Any, Optional, Tuple

logger = logging.getLogger(__name__)


def _remove_file(path: str):
    try:
        os.remove(path)
        logger.info(f"Released preview file {path}")
    except FileNotFoundError:
        pass


class PreviewSlot:
    """Holds the local preview file for the currently selected concept art.

    The previous file is deleted when a new selection replaces it, when the
    selection is cleared, and when the slot is closed or garbage collected.
    """

    def __init__(self, directory: Optional[str] = None):
        self.directory = directory
        self.path: Optional[str] = None
        self._key: Optional[Tuple[Any, ...]] = None
        self._finalizer: Optional[weakref.finalize] = None

    @staticmethod
    def _selection_key(uploaded_file: Any) -> Tuple[Any, ...]:
        return (
            getattr(uploaded_file, "file_id", None),
            getattr(uploaded_file, "name", None),
            getattr(uploaded_file, "size", None),
        )

    def select(self, uploaded_file: Any) -> Optional[str]:
        """Point the slot at a new selection and return its preview path.

        Selecting the same upload again keeps the existing preview file.
        Selecting None clears the slot.
        """
        if uploaded_file is None:
            self.release()
            return None

        key = self._selection_key(uploaded_file)
        if key == self._key and self.path:
            return self.path

        self.release()
        _, extension = os.path.splitext(getattr(uploaded_file, "name", "") or "")
        fd, path = tempfile.mkstemp(prefix="concept_art_", suffix=extension, dir=self.directory)
        with os.fdopen(fd, "wb") as f:
            f.write(uploaded_file.getvalue())

        self.path = path
        self._key = key
        self._finalizer = weakref.finalize(self, _remove_file, path)
        logger.info(f"Created preview file {path}")
        return path

    def release(self):
        if self._finalizer is not None:
            self._finalizer()
        self._finalizer = None
        self.path = None
        self._key = None

    def close(self):
        self.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
