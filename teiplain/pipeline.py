"""Conversion orchestration for teiplain.

Responsibilities:
- Define the stage order read -> render -> shorten -> write for one TEI source.
- Wrap each stage with start/complete/failure telemetry.
- Map stage failures to `ConversionStageError` diagnostics.

Key types:
- `TeiTextPipeline`: orchestration facade.
- `RenderedDocument`: immutable record of one conversion result.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from .config import TeiplainConfig
from .errors import ConversionStageError
from .io.xml_reader import TeiXmlReader
from .models.markup import Document, MarkupNode, RenderContext, iter_elements
from .telemetry.logger import RunLogger
from .text.normalizer import TextNormalizer
from .text.renderer import MarkupRenderer
from .text.truncation import shorten

_StageResult = TypeVar("_StageResult")


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    """Result of one conversion run.

    Attributes:
        text: Rendered text, nodes joined by a single space.
        teaser: Shortened text, or `None` when no length budget was configured.
        fragment_count: Total number of fragments emitted by the renderer.
        node_count: Number of rendered nodes.
    """

    text: str
    teaser: str | None
    fragment_count: int
    node_count: int


class TeiTextPipeline:
    """Coordinate all stages for a single TEI-to-text conversion."""

    def __init__(
        self,
        run_logger: RunLogger | None = None,
        reader: TeiXmlReader | None = None,
        renderer: MarkupRenderer | None = None,
    ) -> None:
        """Initialize the pipeline with optional logger and stage collaborators."""

        self._run_logger = run_logger
        self._reader = reader or TeiXmlReader()
        self._renderer = renderer or MarkupRenderer()
        self._normalizer = TextNormalizer()

    def run(self, config: TeiplainConfig) -> RenderedDocument:
        """Convert the configured source and optionally persist the text."""

        self._validate_config(config)
        document = self._run_stage("read", lambda: self._read(config))
        text, fragment_count, node_count = self._run_stage(
            "render",
            lambda: self._render(document, config),
            describe=lambda rendered: {"fragments": rendered[1], "nodes": rendered[2]},
        )
        teaser = None
        if config.max_length is not None:
            max_length = config.max_length
            teaser = self._run_stage("shorten", lambda: shorten(text, max_length))
        output_path = config.output_path
        if output_path is not None:
            self._run_stage("write", lambda: self._write(output_path, text))
        return RenderedDocument(
            text=text,
            teaser=teaser,
            fragment_count=fragment_count,
            node_count=node_count,
        )

    def _validate_config(self, config: TeiplainConfig) -> None:
        """Validate config and map failures to the `config` stage."""

        try:
            config.validate()
        except ValueError as exc:
            raise ConversionStageError(
                stage="config",
                detail=str(exc),
                hint="Fix config values and rerun.",
            ) from exc

    def _read(self, config: TeiplainConfig) -> Document:
        """Parse the configured XML source."""

        try:
            return self._reader.read_path(config.input_path)
        except FileNotFoundError as exc:
            raise ConversionStageError(
                stage="read",
                detail=f"Input file not found: `{config.input_path}`.",
                hint="Pass an existing TEI XML file.",
            ) from exc
        except ValueError as exc:
            raise ConversionStageError(
                stage="read",
                detail=f"Failed to parse `{config.input_path}`: {exc}",
                hint="Check that the input is well-formed XML.",
            ) from exc

    def _select_nodes(self, document: Document, config: TeiplainConfig) -> list[MarkupNode]:
        """Return the node list to render: matching elements or the whole document."""

        if config.element is None:
            return [document]
        return list(iter_elements(document, config.element))

    def _render(self, document: Document, config: TeiplainConfig) -> tuple[str, int, int]:
        """Render the selected nodes, flatten each, and join node strings with one space."""

        nodes = self._select_nodes(document, config)
        context = RenderContext(locale=config.locale)
        fragment_count = 0
        parts: list[str] = []
        for node in nodes:
            fragments = list(self._renderer.render(node, context))
            fragment_count += len(fragments)
            parts.append("".join(fragments))
        text = " ".join(parts)
        if config.normalize:
            text = self._normalizer.normalize(text)
        return text, fragment_count, len(nodes)

    def _write(self, output_path: Path, text: str) -> None:
        """Write rendered text to `output_path` as UTF-8."""

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ConversionStageError(
                stage="write",
                detail=f"Failed to write `{output_path}`: {exc}",
                hint="Verify the output directory is writable.",
            ) from exc

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        describe: Callable[[_StageResult], dict[str, object]] | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events.

        `describe` maps the stage result to extra context for the complete event.
        Failures other than `ConversionStageError` are wrapped with the stage name.
        """

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_stage_failure(stage_name, type(exc).__name__)
            if isinstance(exc, ConversionStageError):
                raise
            raise ConversionStageError(
                stage=stage_name,
                detail=f"{type(exc).__name__}: {exc}",
                hint="Rerun with `--verbose` to see stage logs.",
            ) from exc
        if self._run_logger is not None:
            context = describe(result) if describe is not None else {}
            self._run_logger.log_stage_complete(stage_name, **context)
        return result
