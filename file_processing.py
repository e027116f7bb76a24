import os
import re
import math
import logging
import time
import uuid
from datetime import date, time as dt_time, timedelta
from http import HTTPStatus
from typing import Any, List, Optional

import pandas as pd
from openpyxl import load_workbook
from openpyxl.cell.cell import TYPE_BOOL, TYPE_ERROR, TYPE_FORMULA, TYPE_NUMERIC
from openpyxl.utils.datetime import WINDOWS_EPOCH, to_excel
from pandas.api.types import is_bool, is_float, is_integer
from pydantic import BaseModel

from utils.heap_selection import find_nth_minimum
from utils.result import Result

logger = logging.getLogger(__name__)

# Optional sign followed by digits, no whitespace or decimal part
INTEGER_TEXT = re.compile(r"[+-]?\d+")


class LogContext:
    """Context manager for tracking and logging operation metrics"""
    def __init__(self, operation_name: str, **kwargs):
        self.operation_name = operation_name
        self.start_time = None
        self.request_id = kwargs.get('request_id', str(uuid.uuid4())[:8])
        self.extra = kwargs

    def __enter__(self):
        self.start_time = time.time()
        logger.info(f"Starting {self.operation_name}", extra={**self.extra, "request_id": self.request_id})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = time.time() - self.start_time
        if exc_type:
            logger.error(
                f"Failed {self.operation_name} in {duration:.2f}s: {str(exc_val)}",
                extra={**self.extra, "request_id": self.request_id, "duration": duration},
                exc_info=(exc_type, exc_val, exc_tb)
            )
        else:
            logger.info(
                f"Completed {self.operation_name} in {duration:.2f}s",
                extra={**self.extra, "request_id": self.request_id, "duration": duration}
            )


class NthMinimumRequest(BaseModel):
    """
    Input for an n-th minimum lookup.

    Attributes:
        file_path: Path to an .xlsx workbook on the server's filesystem
        n: 1-based rank of the minimum to find
    """
    file_path: Optional[str] = None
    n: Optional[int] = None


class NthMinimumResponse(BaseModel):
    """
    Detailed outcome of an n-th minimum lookup.

    Attributes:
        success: Whether the lookup succeeded
        status_code: HTTP status code of the response
        status: HTTP status description
        n: Requested rank
        result: The n-th minimum, when found
        total_numbers: How many numbers were extracted from the workbook
        error: Error message if unsuccessful
    """
    success: bool
    status_code: Optional[int] = 200
    status: Optional[str] = "OK"
    n: Optional[int] = None
    result: Optional[int] = None
    total_numbers: Optional[int] = None
    error: Optional[str] = None


def cell_to_int(value: Any, data_type: str = TYPE_NUMERIC, epoch=WINDOWS_EPOCH) -> Optional[int]:
    """
    Convert a first-column cell to an integer.

    Numeric cells are truncated toward zero. Date and time cells count as
    their Excel serial number, truncated the same way. Text cells are accepted
    only when they hold a plain signed integer such as "42" or "-7". Formula,
    boolean, error and blank cells yield None, as do decimals written as text
    and free text.

    Args:
        value: Cell value as loaded by openpyxl with formulas kept as text
        data_type: openpyxl cell data type ("n", "s", "f", "b", "e", "d")
        epoch: Workbook date epoch used for date serials

    Returns:
        Optional[int]: The integer, or None if the cell should be skipped
    """
    if value is None or data_type in (TYPE_FORMULA, TYPE_ERROR, TYPE_BOOL):
        return None
    if isinstance(value, (date, dt_time, timedelta)):
        return int(to_excel(value, epoch))
    if is_bool(value):
        return None
    if is_integer(value):
        return int(value)
    if is_float(value):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str) and INTEGER_TEXT.fullmatch(value):
        return int(value)
    return None


class FileProcessor:
    """
    Finds the n-th minimum number in the first column of an Excel workbook.

    The lookup runs in three stages, each returning a Result:
    - read the workbook's first sheet
    - extract integers from its first column
    - select the n-th minimum with a bounded max-heap
    """

    @staticmethod
    def find_nth_minimum(request: NthMinimumRequest) -> Result[NthMinimumResponse]:
        """
        Run the full lookup for a request.

        Args:
            request: NthMinimumRequest holding the workbook path and the rank

        Returns:
            Result[NthMinimumResponse]: The response on success, otherwise the
            first stage failure with its status code
        """
        request_id = str(uuid.uuid4())[:8]
        log_context = {
            "request_id": request_id,
            "file_path": request.file_path,
            "rank": request.n
        }

        logger.info("Finding n-th minimum in Excel file", extra=log_context)

        try:
            with LogContext("number extraction", **log_context):
                numbers_result = FileProcessor.read_numbers(request.file_path)

            if numbers_result.is_failure():
                logger.warning(f"Number extraction failed: {numbers_result.error}", extra=log_context)
                return numbers_result

            with LogContext("n-th minimum selection", **log_context):
                selection_result = numbers_result.and_then(
                    lambda numbers: FileProcessor._select(numbers, request.n)
                )

            if selection_result.is_success():
                logger.info(
                    f"Found n-th minimum {selection_result.data.result} "
                    f"among {selection_result.data.total_numbers} numbers",
                    extra=log_context
                )
            else:
                logger.warning(f"Selection failed: {selection_result.error}", extra=log_context)

            return selection_result

        except Exception as e:
            logger.exception("Unexpected error during n-th minimum lookup", extra={**log_context, "error": str(e)})
            return Result.server_error(f"Processing error: {str(e)}")

    @staticmethod
    def read_numbers(file_path: Optional[str]) -> Result[List[int]]:
        """
        Extract the integers of the first column of the first sheet, in row order.

        Args:
            file_path: Path to the Excel file

        Returns:
            Result containing the numbers, or the reason none could be read
        """
        sheet_result = FileProcessor._read_sheet(file_path)
        if sheet_result.is_failure():
            return sheet_result

        df = sheet_result.data
        if df.empty:
            logger.warning("Excel sheet is empty", extra={"file_path": file_path})
            return Result.invalid_input("No valid numbers found in the file")

        epoch = df.attrs.get("epoch", WINDOWS_EPOCH)
        numbers = []
        skipped = 0
        for cell in df.itertuples(index=False):
            number = cell_to_int(cell.value, cell.data_type, epoch)
            if number is None:
                skipped += 1
            else:
                numbers.append(number)

        logger.info(
            "Extracted numbers from first column",
            extra={"file_path": file_path, "number_count": len(numbers), "skipped_cells": skipped}
        )

        if not numbers:
            return Result.invalid_input("No valid numbers found in the file")
        return Result.ok(numbers)

    @staticmethod
    def _read_sheet(file_path: Optional[str]) -> Result[pd.DataFrame]:
        """
        Validates that the file exists and loads column A of its first sheet.

        Every sheet row becomes one DataFrame row holding the cell ``value`` and
        its openpyxl ``data_type``; there is no header row. The workbook is opened
        with ``data_only=False`` so formula cells keep their formula and can be
        told apart from literal numbers. The workbook date epoch is kept in
        ``df.attrs["epoch"]``.

        Args:
            file_path: Path to the Excel file

        Returns:
            Result containing either DataFrame or error message
        """
        if not file_path:
            logger.error("File path is missing")
            return Result.not_found("No file path provided")

        if not os.path.exists(file_path):
            logger.error("File not found", extra={"file_path": file_path})
            return Result.not_found(f"File does not exist at path: {file_path}")

        try:
            logger.debug("Attempting to read Excel file", extra={"file_path": file_path})
            start_time = time.time()
            workbook = load_workbook(file_path, read_only=True, data_only=False)
            try:
                sheet = workbook.worksheets[0]
                cells = [(row[0].value, row[0].data_type) for row in sheet.iter_rows(min_col=1, max_col=1)]
                epoch = workbook.epoch
            finally:
                workbook.close()

            df = pd.DataFrame(cells, columns=["value", "data_type"], dtype=object)
            df.attrs["epoch"] = epoch
            read_time = time.time() - start_time
            logger.info(
                "Successfully read Excel file",
                extra={
                    "file_path": file_path,
                    "row_count": len(df),
                    "read_time_seconds": f"{read_time:.2f}"
                }
            )
            return Result.ok(df)
        except Exception as e:
            logger.error(
                "Failed to read Excel file",
                extra={
                    "file_path": file_path,
                    "error": str(e),
                    "error_type": type(e).__name__
                }
            )
            return Result.fail(f"Failed to read Excel file: {str(e)}", status_code=HTTPStatus.BAD_REQUEST)

    @staticmethod
    def _select(numbers: List[int], n: Optional[int]) -> Result[NthMinimumResponse]:
        """
        Validate the rank against the extracted numbers and pick the n-th minimum.

        Args:
            numbers: Non-empty list of extracted integers
            n: Requested 1-based rank

        Returns:
            Result containing NthMinimumResponse, or 400 for an out-of-range rank
        """
        if n is None or n <= 0 or n > len(numbers):
            return Result.invalid_input(f"N must be between 1 and {len(numbers)}")

        try:
            value = find_nth_minimum(numbers, n)
        except ValueError as e:
            return Result.invalid_input(str(e))

        response = NthMinimumResponse(
            success=True,
            status_code=HTTPStatus.OK.value,
            status=HTTPStatus.OK.phrase,
            n=n,
            result=value,
            total_numbers=len(numbers)
        )
        return Result.ok(response)
