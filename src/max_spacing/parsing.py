"""Graph loading helpers."""

from __future__ import annotations

import csv
import re
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, TextIO, Tuple

import numpy as np
import pandas as pd


_COLUMNS = ["vertex1", "vertex2", "cost"]
_INTEGER_PATTERN = r"[+-]?\d+"
_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


class GraphParseError(ValueError):
    """Raised when the graph file does not follow the expected layout."""


@dataclass
class Graph:
    """Vertex count declared in the header plus the edge list that follows it."""

    num_vertices: int
    edges: List[Tuple[int, int, int]] = field(default_factory=list)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def vertex_ids(self) -> List[int]:
        """Return every vertex id referenced by an edge, in order of first appearance."""

        seen: dict[int, None] = {}
        for first, second, _ in self.edges:
            seen.setdefault(first)
            seen.setdefault(second)
        return list(seen)


def read_graph(path: str | Path) -> Graph:
    """Load the graph stored at `path`."""

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            return parse_graph(handle)
    except UnicodeDecodeError as exc:
        raise GraphParseError(f"'{path}' is not valid UTF-8 text: {exc}") from exc


def parse_graph(handle: TextIO) -> Graph:
    """Parse a vertex-count header followed by ``vertex1 vertex2 cost`` lines."""

    header = handle.readline().split()
    if not header:
        raise GraphParseError("line 1: missing vertex count")
    if not re.fullmatch(_INTEGER_PATTERN, header[0]):
        raise GraphParseError(f"line 1: vertex count '{header[0]}' is not an integer")
    num_vertices = int(header[0])
    if num_vertices < 0:
        raise GraphParseError(f"line 1: vertex count must be non-negative, got {num_vertices}")

    try:
        with warnings.catch_warnings():
            # Fields past the third are dropped, as in a plain whitespace split.
            warnings.simplefilter("ignore", pd.errors.ParserWarning)
            frame = pd.read_csv(
                handle,
                sep=r"\s+",
                header=None,
                names=_COLUMNS,
                dtype=str,
                index_col=False,
                skip_blank_lines=False,
                quoting=csv.QUOTE_NONE,
            )
    except pd.errors.EmptyDataError:
        return Graph(num_vertices=num_vertices)
    except pd.errors.ParserError as exc:
        raise GraphParseError(f"malformed edge list: {exc}") from exc

    frame = frame.dropna(how="all")
    if frame.empty:
        return Graph(num_vertices=num_vertices)

    missing = frame[_COLUMNS].isna().any(axis=1).to_numpy()
    if missing.any():
        label = frame.index[np.flatnonzero(missing)[0]]
        raise GraphParseError(f"line {_line_number(label)}: expected 3 fields (vertex1 vertex2 cost)")

    columns = {}
    for column in _COLUMNS:
        values = frame[column]
        invalid = (~values.str.fullmatch(_INTEGER_PATTERN, na=False)).to_numpy()
        if invalid.any():
            label = frame.index[np.flatnonzero(invalid)[0]]
            raise GraphParseError(
                f"line {_line_number(label)}: {column} '{values.loc[label]}' is not an integer"
            )
        out_of_range = values.map(lambda raw: not _INT64_MIN <= int(raw) <= _INT64_MAX).to_numpy(dtype=bool)
        if out_of_range.any():
            label = frame.index[np.flatnonzero(out_of_range)[0]]
            raise GraphParseError(
                f"line {_line_number(label)}: {column} '{values.loc[label]}' is out of range"
            )
        columns[column] = values.map(int).astype(np.int64)

    negative = (columns["cost"] < 0).to_numpy()
    if negative.any():
        label = frame.index[np.flatnonzero(negative)[0]]
        raise GraphParseError(f"line {_line_number(label)}: negative edge cost {columns['cost'].loc[label]}")

    edges = list(
        zip(
            columns["vertex1"].tolist(),
            columns["vertex2"].tolist(),
            columns["cost"].tolist(),
        )
    )
    return Graph(num_vertices=num_vertices, edges=edges)


def _line_number(label: int) -> int:
    # Row 0 of the frame is line 2 of the file.
    return int(label) + 2
