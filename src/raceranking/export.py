"""Delimited-text export of the session matrix via pandas."""

from __future__ import annotations

import io

import pandas as pd

from raceranking.config import CSV_DELIMITER
from raceranking.engine.types import SessionMatrix


def matrix_to_dataframe(matrix: SessionMatrix) -> pd.DataFrame:
    """Session matrix as a string-typed DataFrame, header as columns."""
    return pd.DataFrame(matrix.rows, columns=matrix.header, dtype=str)


def matrix_to_csv(matrix: SessionMatrix, delimiter: str = CSV_DELIMITER) -> str:
    """Serialize the matrix as delimited text, header row first."""
    return matrix_to_dataframe(matrix).to_csv(
        sep=delimiter, index=False, lineterminator="\n",
    )


def read_matrix_csv(
    text: str, delimiter: str = CSV_DELIMITER,
) -> tuple[list[str], list[list[str]]]:
    """Parse exported text back into (header, rows), every cell a string."""
    frame = pd.read_csv(
        io.StringIO(text),
        sep=delimiter,
        header=None,
        dtype=str,
        keep_default_na=False,
    )
    records = frame.values.tolist()
    if not records:
        return [], []
    return records[0], records[1:]
