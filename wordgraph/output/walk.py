"""Plain-text persistence of random walks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ..utils.error_handling import ErrorHandler, ErrorSeverity, Result

logger = logging.getLogger(__name__)

DEFAULT_WALK_FILENAME = "random_walk.txt"


def format_walk(nodes: Sequence[str]) -> str:
    return " ".join(nodes)


def save_walk(nodes: Sequence[str], path: Union[str, Path] = DEFAULT_WALK_FILENAME,
              error_handler: Optional[ErrorHandler] = None) -> Result[Path, Exception]:
    """Write the space-joined walk to ``path``, overwriting any previous walk."""
    handler = error_handler or ErrorHandler("WalkWriter")
    target = Path(path)

    def write(file_path):
        Path(file_path).write_text(format_walk(nodes), encoding="utf-8")
        return target

    result = handler.safe_file_operation(
        str(target), write, operation_name="save_walk", severity=ErrorSeverity.LOW
    )
    if result.is_success:
        logger.info(f"Random walk saved to {target}")
    return result
