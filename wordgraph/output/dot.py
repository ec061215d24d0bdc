"""
Graphviz output for the word graph.

Produces the textual ``digraph`` description consumed by the external ``dot``
tool, and optionally runs that tool to render a PNG image.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..graph.word_graph import WordGraph
from ..utils.error_handling import ErrorContext, ErrorHandler, ErrorSeverity, Result

logger = logging.getLogger(__name__)


def graph_to_dot(graph: WordGraph) -> str:
    """One ``"from" -> "to" [label="weight"];`` line per edge, in insertion order."""
    lines = ["digraph g {"]
    for source, target, weight in graph.edges():
        lines.append(f'    "{source}" -> "{target}" [label="{weight}"];')
    lines.append("}")
    return "\n".join(lines)


@dataclass
class RenderOutput:
    """Files produced by a render."""
    dot_path: Path
    image_path: Optional[Path] = None


class GraphRenderer:
    """Writes the DOT description and renders it with Graphviz."""

    def __init__(self, dot_executable: str = "dot", image_format: str = "png",
                 timeout: Optional[float] = 60.0):
        self.dot_executable = dot_executable
        self.image_format = image_format
        self.timeout = timeout
        self.error_handler = ErrorHandler("GraphRenderer")

    def write_dot(self, graph: WordGraph, dot_path: Union[str, Path]) -> Result[Path, Exception]:
        """Write the DOT description to ``dot_path``."""
        dot_path = Path(dot_path)

        def write(file_path):
            Path(file_path).write_text(graph_to_dot(graph), encoding="utf-8")
            return dot_path

        result = self.error_handler.safe_file_operation(
            str(dot_path), write, operation_name="write_dot", severity=ErrorSeverity.LOW
        )
        if result.is_success:
            logger.info(f"DOT file written: {dot_path}")
        return result

    def render(self, graph: WordGraph, dot_path: Union[str, Path],
               image_path: Union[str, Path]) -> Result[RenderOutput, Exception]:
        """
        Write the DOT file, then run ``dot -T<format> <dot> -o <image>``.

        A missing or failing Graphviz install yields a failed Result; the
        DOT file is still left on disk.
        """
        written = self.write_dot(graph, dot_path)
        if written.is_failure:
            return Result.failure(written.error)

        image_path = Path(image_path)
        command = [
            self.dot_executable,
            f"-T{self.image_format}",
            str(written.value),
            "-o",
            str(image_path),
        ]
        context = ErrorContext(
            operation="render",
            component=self.error_handler.component_name,
            file_path=str(image_path),
            severity=ErrorSeverity.LOW,
            additional_info={'command': command}
        )
        called = self.error_handler.safe_subprocess_call(command, context, timeout=self.timeout)
        if called.is_failure:
            return Result.failure(called.error)

        logger.info(f"Graph image rendered: {image_path}")
        return Result.success(RenderOutput(dot_path=written.value, image_path=image_path))
