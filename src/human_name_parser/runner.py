"""Convenience helpers for parsing whole columns of names."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .errors import NameParserError
from .parser import FIELDS, NameParser, ParsedName, ParserConfig


ERROR_COLUMN = "parse_error"
_ON_ERROR_CHOICES = {"raise", "skip"}


@dataclass
class ParseFileConfig:
    """Configuration parameters for batch parsing."""

    name_column: str = "name"
    use_tqdm: bool | None = None
    verbose: bool = True
    on_error: str = "raise"
    parser: ParserConfig = field(default_factory=ParserConfig)

    def __post_init__(self) -> None:
        if self.on_error not in _ON_ERROR_CHOICES:
            raise ValueError(f"on_error must be one of {sorted(_ON_ERROR_CHOICES)}, not {self.on_error!r}")

    @property
    def progress(self) -> bool:
        if self.use_tqdm is not None:
            return self.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE


def parse_series(values: Iterable[object], config: ParseFileConfig | None = None) -> pd.DataFrame:
    """Parse every value and return one row of components per value.

    Missing values produce an empty row. With ``on_error="skip"`` a name that
    fails to parse produces an empty row whose ``parse_error`` holds the message.
    """

    config = config or ParseFileConfig()
    parser = NameParser(config.parser)
    items = list(values)

    iterator: Iterable[object] = items
    if items and config.progress:
        iterator = tqdm(items, desc="   Parsing Names", unit="name")

    rows: List[dict] = []
    for value in iterator:
        error = ""
        if value is None or (isinstance(value, float) and pd.isna(value)):
            parsed = ParsedName()
        else:
            try:
                parsed = parser.parse(value if isinstance(value, (str, bytes)) else str(value))
            except NameParserError as exc:
                if config.on_error == "raise":
                    raise
                parsed = ParsedName()
                error = str(exc)
        row = parsed.as_dict()
        row[ERROR_COLUMN] = error
        rows.append(row)

    return pd.DataFrame(rows, columns=[*FIELDS, ERROR_COLUMN])


def parse_dataframe(dataframe: pd.DataFrame, config: ParseFileConfig | None = None) -> pd.DataFrame:
    """Return a copy of `dataframe` with a column for every name component."""

    config = config or ParseFileConfig()
    if config.name_column not in dataframe.columns:
        raise KeyError(f"Column '{config.name_column}' not found in dataframe")

    df = dataframe.copy()
    components = parse_series(df[config.name_column].tolist(), config)
    components.index = df.index
    for column in components.columns:
        df[column] = components[column]
    return df


def parse_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    config: Optional[ParseFileConfig] = None,
) -> pd.DataFrame | None:
    """Parse the name column of `input_path` and write the annotated results."""

    input_path = Path(input_path)
    config = config or ParseFileConfig()
    verbose = config.verbose
    start = time.time()

    try:
        dataframe = _load_dataframe(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a CSV or Excel file.")
        return None

    if config.name_column not in dataframe.columns:
        print(f"ERROR: Column '{config.name_column}' not found in '{input_path}'. Please check --name-column.")
        return None

    if verbose:
        print("--- Human Name Parser Started ---")
        print(f"   Loaded {len(dataframe)} names from '{input_path}'.")

    try:
        df = parse_dataframe(dataframe, config)
    except NameParserError as exc:
        print(f"ERROR: {exc}")
        return None

    if verbose:
        failures = int((df[ERROR_COLUMN] != "").sum())
        with_last = int((df["last"] != "").sum())
        print("\n--- Results Summary ---")
        print(f"   - Total names processed: {len(df)}")
        print(f"   - Names with a last name: {with_last}")
        print(f"   - Names that failed to parse: {failures}")

    if output_path is not None:
        try:
            _save_dataframe(df, output_path)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return None
        if verbose:
            print(f"\n   Processing complete. Results saved to '{output_path}'")

    if verbose:
        print(f"\n--- Human Name Parser Finished in {time.time() - start:.2f} seconds ---")
    return df


def _load_dataframe(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix in {".xls", ".xlsx"}:
        return pd.read_excel(path, dtype=str, keep_default_na=False)
    raise ValueError("unsupported format")


def _save_dataframe(dataframe: pd.DataFrame, output_path: str | Path) -> None:
    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        dataframe.to_csv(path, index=False)
        return
    if suffix in {".xls", ".xlsx"}:
        dataframe.to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")


__all__ = ["ERROR_COLUMN", "ParseFileConfig", "parse_dataframe", "parse_file", "parse_series"]
