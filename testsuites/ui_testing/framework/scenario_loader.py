"""
================================================================================
Scenario Loader Module
================================================================================

Data-driven scenarios for UI tests, loaded either from in-code fixtures or
from the named sheets of a spreadsheet workbook.

Key Features:
- Immutable Scenario model shared by fixtures and spreadsheet rows
- Closed expected-outcome enum (success / error)
- Sheet enumeration and ordered row loading
- Missing files and sheets surface as configuration errors
- Workbook writer used to generate the default login workbook

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd
from loguru import logger


# ================================================================================
# Errors
# ================================================================================

class ScenarioDataError(Exception):
    """Raised when scenario data cannot be loaded or is malformed."""
    pass


class SheetNotFoundError(ScenarioDataError):
    """Raised when a requested sheet does not exist in the workbook."""

    def __init__(self, sheet_name: str, workbook: Union[str, Path], available: Sequence[str]):
        self.sheet_name = sheet_name
        self.workbook = Path(workbook)
        self.available = list(available)
        super().__init__(
            f'Sheet "{sheet_name}" not found in workbook {self.workbook} '
            f"(available: {', '.join(self.available) or 'none'})"
        )


# ================================================================================
# Data Models
# ================================================================================

class ExpectedOutcome(str, Enum):
    """Expected result of submitting a scenario."""
    SUCCESS = "success"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Any) -> "ExpectedOutcome":
        """
        Parse a raw outcome value.

        Blank values default to SUCCESS; unknown values are rejected.
        """
        if isinstance(value, cls):
            return value
        text = "" if value is None else str(value).strip().lower()
        if not text:
            return cls.SUCCESS
        try:
            return cls(text)
        except ValueError:
            allowed = ", ".join(o.value for o in cls)
            raise ScenarioDataError(
                f"Unknown expected outcome {value!r} (allowed: {allowed})"
            ) from None


# Spreadsheet header written by the workbook writer
SCENARIO_COLUMNS: Tuple[str, ...] = (
    "testId",
    "description",
    "username",
    "password",
    "expectedOutcome",
    "expectedError",
)

# Accepted header spellings per Scenario field
COLUMN_ALIASES: Dict[str, Tuple[str, ...]] = {
    "test_id": ("testId", "TestId", "test_id"),
    "description": ("description", "Description"),
    "username": ("username", "Username"),
    "password": ("password", "Password"),
    "expected_outcome": ("expectedOutcome", "ExpectedOutcome", "expected_outcome"),
    "expected_errors": ("expectedError", "ExpectedError", "expected_error"),
}

# Several expected errors may share one cell
ERROR_SEPARATOR = "|"


def _pick(row: Mapping[str, Any], field_name: str) -> str:
    for column in COLUMN_ALIASES[field_name]:
        value = row.get(column)
        if value is not None:
            return str(value)
    return ""


@dataclass(frozen=True)
class Scenario:
    """
    One login scenario: inputs plus the expected outcome.

    Attributes:
        test_id: Short identifier (e.g. VL001)
        description: Human-readable description
        username: Username input (may be empty)
        password: Password input (may be empty)
        expected_outcome: success or error
        expected_errors: Substrings expected in the visible error messages
    """
    test_id: str
    description: str
    username: str
    password: str
    expected_outcome: ExpectedOutcome = ExpectedOutcome.SUCCESS
    expected_errors: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "expected_outcome", ExpectedOutcome.parse(self.expected_outcome))
        object.__setattr__(self, "expected_errors", tuple(self.expected_errors))

    @property
    def id(self) -> str:
        """Pytest parametrize id."""
        return f"{self.test_id} - {self.description}"

    def __str__(self) -> str:
        return self.id

    @property
    def expects_success(self) -> bool:
        return self.expected_outcome is ExpectedOutcome.SUCCESS

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Scenario":
        """Build a Scenario from a spreadsheet row."""
        raw_errors = _pick(row, "expected_errors")
        errors = tuple(
            part.strip() for part in raw_errors.split(ERROR_SEPARATOR) if part.strip()
        )
        return cls(
            test_id=_pick(row, "test_id").strip(),
            description=_pick(row, "description").strip(),
            # Inputs keep their whitespace: boundary rows rely on it
            username=_pick(row, "username"),
            password=_pick(row, "password"),
            expected_outcome=ExpectedOutcome.parse(_pick(row, "expected_outcome")),
            expected_errors=errors,
        )

    def to_row(self) -> Dict[str, str]:
        """Inverse of from_row, keyed by SCENARIO_COLUMNS."""
        return {
            "testId": self.test_id,
            "description": self.description,
            "username": self.username,
            "password": self.password,
            "expectedOutcome": self.expected_outcome.value,
            "expectedError": ERROR_SEPARATOR.join(self.expected_errors),
        }


# ================================================================================
# Scenario Loader
# ================================================================================

class ScenarioLoader:
    """
    Loads Scenario records from a spreadsheet workbook.

    Example:
        loader = ScenarioLoader("testsuites/ui_testing/data/login_test_data.xlsx")
        for name in loader.sheet_names():
            for scenario in loader.load(name):
                print(scenario.id)
    """

    def __init__(self, workbook_path: Union[str, Path]):
        self.workbook_path = Path(workbook_path)

    def _require_workbook(self) -> None:
        if not self.workbook_path.is_file():
            raise ScenarioDataError(f"Scenario workbook not found: {self.workbook_path}")

    def sheet_names(self) -> List[str]:
        """Sheet names in workbook order."""
        self._require_workbook()
        with pd.ExcelFile(self.workbook_path, engine="openpyxl") as workbook:
            return [str(name) for name in workbook.sheet_names]

    def read_rows(self, sheet_name: Optional[str] = None) -> List[Dict[str, str]]:
        """
        Read one sheet as a list of row dictionaries.

        Args:
            sheet_name: Sheet to read; the first sheet when omitted

        Returns:
            Rows in source order, every cell as text ("" when empty)

        Raises:
            ScenarioDataError: Workbook missing or unreadable
            SheetNotFoundError: Sheet does not exist
        """
        names = self.sheet_names()
        if not names:
            raise ScenarioDataError(f"Workbook has no sheets: {self.workbook_path}")
        target = names[0] if sheet_name is None else sheet_name
        if target not in names:
            raise SheetNotFoundError(target, self.workbook_path, names)

        frame = pd.read_excel(
            self.workbook_path,
            sheet_name=target,
            dtype=str,
            keep_default_na=False,
            engine="openpyxl",
        ).fillna("")

        rows = [
            {str(column): str(value) for column, value in record.items()}
            for record in frame.to_dict(orient="records")
        ]
        rows = [row for row in rows if any(value != "" for value in row.values())]
        logger.debug(f"Read {len(rows)} rows from {self.workbook_path.name}[{target}]")
        return rows

    def read_all_sheets(self) -> Dict[str, List[Dict[str, str]]]:
        """Read every sheet, keyed by sheet name."""
        return {name: self.read_rows(name) for name in self.sheet_names()}

    def load(self, sheet_name: Optional[str] = None) -> List[Scenario]:
        """Load one sheet as Scenario records, preserving row order."""
        scenarios = [Scenario.from_row(row) for row in self.read_rows(sheet_name)]
        logger.info(
            f"Loaded {len(scenarios)} scenarios from "
            f"{self.workbook_path.name}[{sheet_name or 'first sheet'}]"
        )
        return scenarios

    def load_all(self) -> Dict[str, List[Scenario]]:
        """Load every sheet as Scenario records."""
        return {name: self.load(name) for name in self.sheet_names()}

    @staticmethod
    def from_literal(scenarios: Iterable[Scenario]) -> List[Scenario]:
        """In-memory provider: an ordered copy of an in-code fixture."""
        return list(scenarios)


# ================================================================================
# Workbook Writer
# ================================================================================

# Column widths for readability when the workbook is opened by hand
COLUMN_WIDTHS: Dict[str, int] = {
    "A": 8,
    "B": 35,
    "C": 30,
    "D": 25,
    "E": 15,
    "F": 25,
}


def _store_formula_text_as_string(worksheet: Any) -> None:
    """
    Keep inputs such as "=1+1" literal.

    openpyxl marks any string starting with "=" as a formula, which reads
    back as an empty cell.
    """
    for row in worksheet.iter_rows(min_row=2):
        for cell in row:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"


def write_scenario_workbook(
    path: Union[str, Path],
    sheets: Mapping[str, Sequence[Scenario]],
) -> Path:
    """
    Write scenarios to a workbook, one sheet per mapping entry.

    The file is written to a temporary sibling first and moved into place,
    so concurrent writers never expose a half-written workbook.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(suffix=".xlsx", dir=str(path.parent))
    os.close(fd)
    try:
        with pd.ExcelWriter(tmp_name, engine="openpyxl") as writer:
            for sheet_name, scenarios in sheets.items():
                frame = pd.DataFrame(
                    [s.to_row() for s in scenarios],
                    columns=list(SCENARIO_COLUMNS),
                )
                frame.to_excel(writer, sheet_name=sheet_name, index=False)
                worksheet = writer.sheets[sheet_name]
                _store_formula_text_as_string(worksheet)
                for letter, width in COLUMN_WIDTHS.items():
                    worksheet.column_dimensions[letter].width = width
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)
        raise

    total = sum(len(s) for s in sheets.values())
    logger.info(f"Wrote {total} scenarios in {len(sheets)} sheets to {path}")
    return path


__all__ = [
    "ScenarioDataError",
    "SheetNotFoundError",
    "ExpectedOutcome",
    "Scenario",
    "ScenarioLoader",
    "SCENARIO_COLUMNS",
    "COLUMN_ALIASES",
    "write_scenario_workbook",
]
