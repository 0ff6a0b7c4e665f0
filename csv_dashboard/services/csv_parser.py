# csv_dashboard/services/csv_parser.py

import io
import math
import re
from typing import Any, Dict, List

import chardet
import pandas as pd

from csv_dashboard.models.csv_models import Row, Scalar

# Same shape of numeric text the browser CSV parsers accept for auto typing
NUMERIC_PATTERN = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")

# Past this, a float no longer holds every integer exactly
MAX_SAFE_INTEGER = 2 ** 53

TRUE_TOKENS = ("true", "TRUE")
FALSE_TOKENS = ("false", "FALSE")


class CSVParseError(Exception):
    pass


def detect_encoding(content: bytes) -> str:
    res = chardet.detect(content)
    return res.get("encoding") or "utf-8"


def decode_bytes(content: bytes) -> str:
    if content.startswith(b"\xef\xbb\xbf"):
        return content[3:].decode("utf-8")
    return content.decode(detect_encoding(content), errors="replace")


def infer_scalar(raw: Any) -> Scalar:
    """
    Type a single CSV cell.

    - "true"/"TRUE" and "false"/"FALSE" become booleans
    - numeric text becomes a number (int when integral)
    - empty or missing cells become None
    - anything else is returned unchanged as a string
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        if pd.isna(raw):
            return None
        return raw

    if raw == "":
        return None
    if raw in TRUE_TOKENS:
        return True
    if raw in FALSE_TOKENS:
        return False
    if NUMERIC_PATTERN.match(raw):
        number = float(raw)
        # Out of range numbers stay text so they survive JSON unchanged
        if not math.isfinite(number) or abs(number) >= MAX_SAFE_INTEGER:
            return raw
        if number.is_integer():
            return int(number)
        return number
    return raw


def rows_from_frame(df: pd.DataFrame) -> List[Row]:
    records: List[Dict[str, Any]] = df.to_dict(orient="records")
    return [
        {str(key): infer_scalar(value) for key, value in record.items()}
        for record in records
    ]


def parse_csv_text(text: str) -> List[Row]:
    """
    Parse CSV text with the first row as header into a list of typed dict rows.
    """
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            index_col=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as e:
        raise CSVParseError("CSV file is empty") from e
    except pd.errors.ParserError as e:
        raise CSVParseError(f"Failed to parse CSV: {e}") from e

    return rows_from_frame(df)


def parse_csv(content: bytes) -> List[Row]:
    """
    Parse an uploaded CSV (raw bytes) into a list of dict rows.
    """
    return parse_csv_text(decode_bytes(content))
