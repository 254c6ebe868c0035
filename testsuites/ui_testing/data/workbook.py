"""
Default login workbook.

The spreadsheet-driven login tests read ``login_test_data.xlsx``. It is
generated from ``WORKBOOK_SHEETS`` when missing; edit the file by hand to
add rows or sheets, or regenerate it with:

    python -m testsuites.ui_testing.data.workbook [--force]
"""

import argparse
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from testsuites.ui_testing.data.login_data import WORKBOOK_SHEETS
from testsuites.ui_testing.framework.scenario_loader import write_scenario_workbook
from uitest_tools.common import get_config


REPO_ROOT = Path(__file__).resolve().parents[3]


def default_workbook_path() -> Path:
    """Configured workbook path, resolved against the repository root."""
    path = Path(get_config("data.login_workbook", "testsuites/ui_testing/data/login_test_data.xlsx"))
    return path if path.is_absolute() else REPO_ROOT / path


def ensure_login_workbook(path: Optional[Union[str, Path]] = None, force: bool = False) -> Path:
    """Generate the login workbook if it does not exist yet."""
    path = Path(path) if path else default_workbook_path()
    if path.exists() and not force:
        return path
    logger.info(f"Generating login workbook: {path}")
    return write_scenario_workbook(path, WORKBOOK_SHEETS)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate the login test workbook")
    parser.add_argument("--output", type=Path, default=None, help="Workbook path")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing workbook")
    args = parser.parse_args()

    path = ensure_login_workbook(args.output, force=args.force)
    for name, scenarios in WORKBOOK_SHEETS.items():
        logger.info(f"- {name}: {len(scenarios)} test cases")
    logger.info(f"Workbook ready: {path}")


if __name__ == "__main__":
    main()
