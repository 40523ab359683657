import csv
from datetime import date, datetime
from pathlib import Path
from typing import Any

import pandas as pd

from .exceptions import LoadError

ENCODINGS = ("utf-8-sig", "latin-1")


def get_date_suffix_for_filename(day: date | None = None) -> str:
    """Returns the date as a YYYY-MM-DD string for filenames (today by default)."""
    return (day or datetime.now().date()).strftime("%Y-%m-%d")


def load_csv(file_path: Path) -> pd.DataFrame:
    """
    Reads a headerless CSV file into a DataFrame of strings.
    Encodings are tried in order:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can read any byte.
    Any other problem aborts the load with a LoadError.
    """
    if not file_path.exists():
        raise LoadError(f"Data file not found: {file_path}")

    for encoding in ENCODINGS:
        try:
            return pd.read_csv(
                file_path,
                encoding=encoding,
                header=None,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=False,
                skipinitialspace=True,
            )
        except UnicodeDecodeError:
            continue
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except pd.errors.ParserError as e:
            raise LoadError(f"Failed to read {file_path.name}: malformed CSV. {e}") from e

    raise LoadError(f"Failed to read {file_path.name}: unsupported file encoding.")


def load_rows(file_path: Path) -> list[tuple[int, list[str]]]:
    """
    Reads a CSV file whose rows may have different lengths (like orders.csv)
    with the same encoding fallback as load_csv.
    Returns (line number, row) pairs; blank rows are dropped.
    """
    if not file_path.exists():
        raise LoadError(f"Data file not found: {file_path}")

    for encoding in ENCODINGS:
        try:
            with open(file_path, newline="", encoding=encoding) as f:
                reader = csv.reader(f)
                rows = [(reader.line_num, [field.strip() for field in row]) for row in reader]
        except UnicodeDecodeError:
            continue
        except csv.Error as e:
            raise LoadError(f"Failed to read {file_path.name}: malformed CSV. {e}") from e
        return [(line_no, row) for line_no, row in rows if any(row)]

    raise LoadError(f"Failed to read {file_path.name}: unsupported file encoding.")


def dataframe_rows(df: pd.DataFrame) -> list[tuple[int, list[str]]]:
    """
    Turns a load_csv frame back into (line number, stripped row) pairs,
    dropping the empty ones. load_csv keeps blank lines, so row position
    and file line stay in step.
    """
    rows = []
    for line_no, values in enumerate(df.to_numpy().tolist(), start=1):
        row = [_clean(value) for value in values]
        while row and row[-1] == "":
            row.pop()
        if row:
            rows.append((line_no, row))
    return rows


def _clean(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def parse_int(value: str, what: str) -> int:
    """Parses an integer field, naming the field in the error."""
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise LoadError(f"invalid {what} '{value}', must be an integer.") from e


def parse_date(value: str, what: str = "date") -> date:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise LoadError(f"invalid {what} '{value}', format must be YYYY-MM-DD.") from e


def parse_bool(value: str) -> bool:
    # Anything but "true" is false, like the files have always been read.
    return value.strip().lower() == "true"
