# topmark:header:start
#
#   project      : OutputWriter
#   file         : writer.py
#   file_relpath : src/outputwriter/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The serialization engine.

`OutputWriter` turns one subject value into one output format:

1. Construction validates the subject, parses the format name into an
   [`OutputFormat`][outputwriter.core.formats.OutputFormat] and normalizes the
   subject. Records are kept verbatim in ``subject_raw`` (for native
   round-tripping) and projected to a mapping in ``subject_normalized``.
2. `set_options()` may be called any number of times before generation.
3. `output()` generates on first use and then returns the memoized string.
4. `emit()` writes that string to the sink.

Example:
    ```python
    from outputwriter import OutputWriter, WriteOption

    writer = OutputWriter({"name": "a", "count": 3}, "json")
    writer.set_options(WriteOption.SORT_KEYS)
    assert writer.output() == '{"count":3,"name":"a"}'
    ```

Notes:
    - An instance is not safe for concurrent use: `set_options`, `generate` and
      `output` mutate shared state without locking.
    - Failures are raised, never logged, by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from outputwriter.config.logging import get_logger
from outputwriter.config.settings import build_settings
from outputwriter.core.errors import InvalidInputError, SinkError, UnsupportedFormatError
from outputwriter.core.formats import OutputFormat, parse_output_format
from outputwriter.core.store import AttributeStore
from outputwriter.core.values import is_record, normalize_value, project_record
from outputwriter.encoders import jsontext, markup, native, tabular
from outputwriter.sinks import StdoutSink

if TYPE_CHECKING:
    from collections.abc import Mapping

    from outputwriter.config.logging import OutputWriterLogger
    from outputwriter.sinks import TextSink

logger: OutputWriterLogger = get_logger(__name__)


@dataclass
class WriterState:
    """Mutable engine state.

    Attributes:
        subject_raw (Any | None): The original input if it was a record, else None.
        subject_normalized (Any): The value fed to the encoders.
        output_format (OutputFormat): The selected encoding.
        options (int): Opaque encoder flags (see `WriteOption`).
        output (str | None): The memoized result; None until generated.
    """

    subject_raw: Any | None
    subject_normalized: Any
    output_format: OutputFormat
    options: int = 0
    output: str | None = None


class OutputWriter:
    """Encode a subject value into a textual format, lazily and at most once.

    Args:
        subject (Any): The value to encode. Must not be None.
        output_format (str | OutputFormat): ``markup`` (alias ``xml``), ``json``,
            ``native`` or ``tabular`` (alias ``csv``); case-insensitive.
        settings (AttributeStore | Mapping[str, Any] | None): An encoder settings
            store (copied, so later changes to it do not reach this writer), or
            overrides layered over the defaults.
        sink (TextSink | None): Destination for `emit()`. Defaults to stdout.

    Raises:
        InvalidInputError: If `subject` is None or cannot be normalized.
        UnsupportedFormatError: If `output_format` is not supported.
    """

    def __init__(
        self,
        subject: Any,
        output_format: str | OutputFormat = OutputFormat.MARKUP,
        *,
        settings: AttributeStore | Mapping[str, Any] | None = None,
        sink: TextSink | None = None,
    ) -> None:
        if subject is None:
            raise InvalidInputError("Data parameter is invalid")
        fmt: OutputFormat = parse_output_format(output_format)

        subject_raw: Any | None = None
        if is_record(subject):
            subject_raw = subject
            normalized: Any = normalize_value(project_record(subject))
        else:
            normalized = normalize_value(subject)

        self._settings: AttributeStore = (
            AttributeStore(settings.get())
            if isinstance(settings, AttributeStore)
            else build_settings(settings)
        )
        self._sink: TextSink = sink if sink is not None else StdoutSink()
        self._state = WriterState(
            subject_raw=subject_raw,
            subject_normalized=normalized,
            output_format=fmt,
        )
        logger.debug(
            "OutputWriter created: format=%s, record=%s",
            fmt.key,
            subject_raw is not None,
        )

    # --- Read-only views ---

    @property
    def subject(self) -> Any:
        """The normalized subject fed to the encoders."""
        return self._state.subject_normalized

    @property
    def subject_raw(self) -> Any | None:
        """The original record, or None if the subject was not a record."""
        return self._state.subject_raw

    @property
    def output_format(self) -> OutputFormat:
        """The selected output format."""
        return self._state.output_format

    @property
    def options(self) -> int:
        """The current options bitmask."""
        return self._state.options

    @property
    def settings(self) -> AttributeStore:
        """The encoder settings store owned by this writer."""
        return self._settings

    @property
    def is_generated(self) -> bool:
        """True once output has been generated."""
        return self._state.output is not None

    # --- Operations ---

    def set_options(self, options: int) -> None:
        """Overwrite the options bitmask.

        Individual bits are not validated. Changing options after generation
        does not affect the cached output.
        """
        self._state.options = int(options)
        logger.trace("Options set to %#x", self._state.options)

    def generate(self) -> None:
        """Encode the subject and cache the result, replacing any previous one.

        Raises:
            UnsupportedFormatError: If the stored format has no encoder.
            UnsupportedShapeError: If the encoder cannot represent the subject.
            InvalidInputError: If the subject or settings are invalid for the encoder.
        """
        state: WriterState = self._state
        fmt: OutputFormat = state.output_format
        logger.debug("Generating %s output (options=%#x)", fmt.key, state.options)

        if fmt is OutputFormat.MARKUP:
            text: str = markup.encode(
                state.subject_normalized, options=state.options, settings=self._settings
            )
        elif fmt is OutputFormat.JSON:
            text = jsontext.encode(
                state.subject_normalized, options=state.options, settings=self._settings
            )
        elif fmt is OutputFormat.NATIVE:
            value: Any = (
                state.subject_raw if state.subject_raw is not None else state.subject_normalized
            )
            text = native.encode(value, options=state.options, settings=self._settings)
        elif fmt is OutputFormat.TABULAR:
            text = tabular.encode(
                state.subject_normalized, options=state.options, settings=self._settings
            )
        else:
            raise UnsupportedFormatError(fmt)

        state.output = text
        logger.trace("Generated %d characters", len(text))

    def output(self) -> str:
        """Return the encoded subject, generating it on first use."""
        if self._state.output is None:
            self.generate()
        # generate() always stores a string
        return self._state.output  # type: ignore[return-value]

    def emit(self) -> None:
        """Write the encoded subject to the sink.

        Raises:
            SinkError: If the sink write fails.
        """
        text: str = self.output()
        try:
            self._sink.write(text)
        except (OSError, ValueError) as exc:
            raise SinkError(f"Cannot write output: {exc}") from exc

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(format={self._state.output_format.key!r}, "
            f"generated={self.is_generated})"
        )
