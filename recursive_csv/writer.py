"""Convert a collection of records into CSV text."""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .config import Settings
from .errors import EmptyCollectionError, MismatchedTypeError
from .flatten import build_header, build_row
from .schema import SchemaContext, TypeClassifier
from .sink import Target, write_text
from .utils.telemetry import RunStats

logger = logging.getLogger(__name__)


class RecursiveCSVWriter:
    """Flatten records of one class into delimiter-separated text.

    The first record's class defines the columns. Nested fields are
    expanded up to ``max_depth`` levels, and a ``None`` composite is padded
    with as many empty cells as its declared type would have filled.

    Settings are swapped wholesale by the ``set_*`` methods; a run reads the
    settings object captured when it starts. Instances are not thread-safe.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        classifier: Optional[TypeClassifier] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.classifier = classifier or TypeClassifier()
        self.last_stats: Optional[RunStats] = None

    def set_use_all_fields(self, use_all_fields: bool) -> None:
        self.settings = self.settings.replace(use_all_fields=use_all_fields)

    def set_max_depth(self, max_depth: int) -> None:
        self.settings = self.settings.replace(max_depth=max_depth)

    def set_allow_arrays(self, allow_arrays: bool) -> None:
        self.settings = self.settings.replace(allow_arrays=allow_arrays)

    def set_array_element_delimiter(self, delimiter: str) -> None:
        self.settings = self.settings.replace(array_element_delimiter=delimiter)

    def set_column_delimiter(self, delimiter: str) -> None:
        self.settings = self.settings.replace(column_delimiter=delimiter)

    def set_ignore_mismatched_type(self, ignore: bool) -> None:
        self.settings = self.settings.replace(ignore_mismatched_type=ignore)

    def set_path_separator(self, separator: str) -> None:
        self.settings = self.settings.replace(path_separator=separator)

    def columns(self, record_type: type) -> List[str]:
        """Column names the current settings produce for ``record_type``."""
        return build_header(SchemaContext.for_run(self.settings, self.classifier), record_type)

    def write_to_string(self, records: Iterable[Any]) -> str:
        """Return the CSV text for ``records``."""
        return self._render(records)

    def write_to_file(self, records: Iterable[Any], target: Target) -> None:
        """Render ``records`` and write the text to a path or stream.

        Nothing is written when rendering fails.
        """
        write_text(target, self._render(records))

    def _render(self, records: Iterable[Any]) -> str:
        settings = self.settings
        items = list(records)
        if not items:
            raise EmptyCollectionError()
        record_type = type(items[0])
        context = SchemaContext.for_run(settings, self.classifier)
        delimiter = settings.column_delimiter

        header = build_header(context, record_type)
        stats = RunStats(record_type=record_type.__qualname__, columns=len(header))
        logger.debug("Schema established for %s (%d columns)", stats.record_type, stats.columns)

        lines = [delimiter.join(header)]
        for index, record in enumerate(items):
            stats.records_seen += 1
            if type(record) is not record_type:
                if not settings.ignore_mismatched_type:
                    raise MismatchedTypeError(record_type, type(record), index)
                stats.records_skipped += 1
                logger.debug("Skipping record %d of type %s", index, type(record).__qualname__)
                continue
            lines.append(delimiter.join(build_row(context, record, record_type)))
            stats.rows_written += 1

        self.last_stats = stats
        logger.info(
            "Converted %d %s records (%d skipped) into %d columns",
            stats.rows_written,
            stats.record_type,
            stats.records_skipped,
            stats.columns,
        )
        return "".join(line + "\n" for line in lines)


__all__ = ["RecursiveCSVWriter"]
