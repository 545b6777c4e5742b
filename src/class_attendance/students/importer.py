from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional, Union

import pandas as pd
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..core.constants import ALLOWED_ROSTER_EXTENSIONS, ROSTER_NAME_COLUMN
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def allowed_file(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_ROSTER_EXTENSIONS


class RosterImporter:
    """Turn an uploaded spreadsheet into candidate student names.

    Only the first sheet is read. Names are taken as-is from the ``Name``
    column: blanks become ``None`` and duplicates are kept.
    """

    def __init__(self, upload_folder: Union[str, Path], *, name_column: str = ROSTER_NAME_COLUMN):
        self.upload_folder = Path(upload_folder)
        self.name_column = name_column

    def save_upload(self, file: FileStorage) -> Path:
        if not file or not file.filename:
            raise ValidationError("No file selected")
        if not allowed_file(file.filename):
            raise ValidationError("Invalid file type. Please upload an Excel file (.xlsx or .xls)")

        self.upload_folder.mkdir(parents=True, exist_ok=True)
        filepath = self.upload_folder / f"{uuid.uuid4().hex}_{secure_filename(file.filename)}"
        file.save(str(filepath))
        logger.debug("Saved roster upload to %s", filepath)
        return filepath

    def read_names(self, source: Union[str, Path, BinaryIO]) -> List[Dict[str, Optional[str]]]:
        df = pd.read_excel(source, sheet_name=0)
        df = df.dropna(how="all")

        column = self._find_name_column(df.columns)
        if column is None:
            raise ValidationError(f"Spreadsheet has no '{self.name_column}' column")

        return [{"name": self._clean(value)} for value in df[column].tolist()]

    def _find_name_column(self, columns) -> Optional[Any]:
        wanted = self.name_column.strip().lower()
        for column in columns:
            if str(column).strip().lower() == wanted:
                return column
        return None

    @staticmethod
    def _clean(value: Any) -> Optional[str]:
        if value is None or pd.isna(value):
            return None
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value).strip()
