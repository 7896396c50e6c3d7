"""
The interactive session: list files, ask for index, size and preset, compress,
show the result, start over.

Each cycle is an explicit walk through `SessionState`:

    SHOW_CATALOG -> AWAIT_FILE_SELECTION -> AWAIT_SIZE -> AWAIT_PRESET
                 -> COMPRESSING -> SHOW_RESULT -> SHOW_CATALOG

Every handler receives the cycle's `SessionContext` and returns the next
state. Rejected input returns `SHOW_CATALOG` directly, which discards whatever
was chosen so far. An empty input folder leads to `EMPTY_CATALOG`, the only
state that ends the session.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple

from loguru import logger
from rich.console import Console
from rich.markup import escape

from ..config.common import DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_DIR
from ..config.video import PRESET_COLORS, PRESET_DESCRIPTIONS, PRESETS
from ..domain.exceptions import InputValidationException, InvalidSelectionException
from ..domain.models import (
    CatalogEntry,
    CompressionRequest,
    CompressionResult,
    parse_size_mb,
    validate_preset,
)
from ..services.compression_service import compress
from ..services.file_catalog import find_entry, list_input_files
from ..utils.format_utils import formatted_size

INDEX_PROMPT = "[red] Enter the index of the file to compress [/]\n > "
SIZE_PROMPT = "[red] Enter desired size in megabytes (a number, e.g. 8 or 7.5) [/]\n > "
PRESET_PROMPT = " > "


class SessionState(Enum):
    SHOW_CATALOG = "show_catalog"
    AWAIT_FILE_SELECTION = "await_file_selection"
    AWAIT_SIZE = "await_size"
    AWAIT_PRESET = "await_preset"
    COMPRESSING = "compressing"
    SHOW_RESULT = "show_result"
    EMPTY_CATALOG = "empty_catalog"


@dataclass
class SessionContext:
    """Everything chosen during one cycle. A new context is created per cycle."""

    entries: List[CatalogEntry] = field(default_factory=list)
    selected: Optional[CatalogEntry] = None
    size_mb: Optional[float] = None
    preset: Optional[str] = None
    result: Optional[CompressionResult] = None
    rejection: Optional[InputValidationException] = None


class InteractiveSession:
    """
    Drives the prompt/compress/restart loop on a `rich` console.

    Args:
        input_dir: Folder listed at the start of every cycle.
        output_dir: Folder receiving `<output_dir>/<file name>`. Must exist.
        console: Console used for all user-facing output.
        reader: Callable that shows a prompt and returns the typed line.
                Defaults to `console.input`. Raising EOFError ends the session.
        compressor: Callable running a `CompressionRequest`. Defaults to
                    `compress` bound to this console.
        audio_reserve_kbps: Forwarded to the default compressor.
    """

    def __init__(
        self,
        input_dir: str = DEFAULT_INPUT_DIR,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        console: Optional[Console] = None,
        reader: Optional[Callable[[str], str]] = None,
        compressor: Optional[Callable[[CompressionRequest], CompressionResult]] = None,
        audio_reserve_kbps: int = 0,
    ):
        self.input_dir = input_dir
        self.output_dir = output_dir
        self.console = console or Console()
        self.reader = reader or self.console.input
        self.compressor = compressor or partial(
            compress, console=self.console, audio_reserve_kbps=audio_reserve_kbps
        )
        self.cycles = 0
        self._handlers: Dict[SessionState, Callable[[SessionContext], SessionState]] = {
            SessionState.AWAIT_FILE_SELECTION: self.await_file_selection,
            SessionState.AWAIT_SIZE: self.await_size,
            SessionState.AWAIT_PRESET: self.await_preset,
            SessionState.COMPRESSING: self.compressing,
            SessionState.SHOW_RESULT: self.show_result,
        }

    # --- Loop ---

    def run(self) -> Optional[SessionState]:
        """
        Runs cycles until the input folder is empty or input runs out.

        Returns:
            `EMPTY_CATALOG` when the folder had no files, None when the reader
            raised EOFError.
        """
        while True:
            try:
                state, _ = self.run_cycle()
            except EOFError:
                logger.info("Input closed, ending session.")
                self.console.print()
                return None
            if state is SessionState.EMPTY_CATALOG:
                return state

    def run_cycle(self) -> Tuple[SessionState, SessionContext]:
        """
        Runs one cycle, from listing the files until the next restart.

        Returns:
            The state the cycle ended in (`SHOW_CATALOG` for a restart or
            `EMPTY_CATALOG`) and the cycle's context.
        """
        self.cycles += 1
        context = SessionContext()
        state = self.show_catalog(context)
        while state not in (SessionState.SHOW_CATALOG, SessionState.EMPTY_CATALOG):
            logger.debug(f"Cycle {self.cycles}: entering {state.value}")
            state = self._handlers[state](context)
        return state, context

    def _reject(self, context: SessionContext, error: InputValidationException) -> SessionState:
        context.rejection = error
        logger.debug(f"Input rejected: {error}")
        self.console.print(f"[yellow]{escape(str(error))}[/]")
        return SessionState.SHOW_CATALOG

    # --- States ---

    def show_catalog(self, context: SessionContext) -> SessionState:
        context.entries = list_input_files(self.input_dir)
        if not context.entries:
            folder = os.path.basename(os.path.normpath(self.input_dir))
            self.console.print(
                f'No files in the "{escape(folder)}" folder, move the files you want to compress there.'
            )
            return SessionState.EMPTY_CATALOG

        for entry in context.entries:
            self.console.print(f"[green] {entry.index} | {escape(entry.file_name)}{self._size_label(entry)}[/]")
        return SessionState.AWAIT_FILE_SELECTION

    @staticmethod
    def _size_label(entry: CatalogEntry) -> str:
        try:
            return f" [dim]({formatted_size(os.path.getsize(entry.path))})[/]"
        except OSError as e:
            logger.debug(f"Could not stat {entry.path}: {e}")
            return ""

    def await_file_selection(self, context: SessionContext) -> SessionState:
        value = self.reader(INDEX_PROMPT).strip()
        try:
            index = int(value)
        except ValueError:
            return self._reject(context, InvalidSelectionException(f"'{value}' is not a file index."))

        entry = find_entry(context.entries, index)
        if entry is None or not os.path.isfile(entry.path):
            return self._reject(
                context,
                InvalidSelectionException(f"No file with index {index}. It may have been removed from the input folder."),
            )
        context.selected = entry
        return SessionState.AWAIT_SIZE

    def await_size(self, context: SessionContext) -> SessionState:
        try:
            context.size_mb = parse_size_mb(self.reader(SIZE_PROMPT))
        except InputValidationException as e:
            return self._reject(context, e)
        self.print_presets()
        return SessionState.AWAIT_PRESET

    def print_presets(self):
        for preset, color in zip(PRESETS, PRESET_COLORS):
            self.console.print(f"[color({color})] {preset} - {PRESET_DESCRIPTIONS[preset]}[/]")

    def await_preset(self, context: SessionContext) -> SessionState:
        try:
            context.preset = validate_preset(self.reader(PRESET_PROMPT))
        except InputValidationException as e:
            return self._reject(context, e)
        return SessionState.COMPRESSING

    def compressing(self, context: SessionContext) -> SessionState:
        request = CompressionRequest(
            input_path=context.selected.path,
            output_path=os.path.join(self.output_dir, context.selected.file_name),
            desired_size_mb=context.size_mb,
            preset=context.preset,
        )
        context.result = self.compressor(request)
        return SessionState.SHOW_RESULT

    def show_result(self, context: SessionContext) -> SessionState:
        result = context.result
        style = "black on green" if result.success else "white on red"
        self.console.print(f"[{style}]    {escape(result.message)} [/]")
        return SessionState.SHOW_CATALOG
