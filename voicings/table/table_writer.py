import os
import json
import tempfile
from contextlib import nullcontext
from typing import Any, Dict, Tuple
from pathlib import Path

import pandas as pd

from util import use_770_permissions

TableRowDescription = Tuple[int, Dict[str, Any]]


class ChordTableWriter:
    """Persists the chord table as JSON, and optionally its flattened CSV view."""

    def __init__(
        self,
        output_path: Path,
        write_with_770_permissions: bool = True,
        indent: int = 2,
    ) -> None:
        """The constructor of the chord table writer.

        Args:
            output_path: Where the JSON file ends up, e.g. '/home/chords.json'. The parent
                directory must already exist.
            write_with_770_permissions: If true, all files written by this class will be given
                permissions 770. This can be useful when working in a shared cluster environment.
            indent: Number of spaces used to indent the JSON.
        """
        if not isinstance(output_path, Path):
            raise ValueError(
                f"output_path must be a Path object. "
                f"It was given as type: {type(output_path)}"
            )
        self.output_path = output_path
        self.indent = indent
        self.write_with_770_permissions = write_with_770_permissions
        self._file_permission_ctx = (
            use_770_permissions if self.write_with_770_permissions else nullcontext
        )

    def serialize(self, data: Dict[str, Any]) -> bytes:
        # dict insertion order is kept, the keys are never sorted
        return json.dumps(data, indent=self.indent, ensure_ascii=False).encode("utf-8")

    def write(self, data: Dict[str, Any]) -> Path:
        """Write the nested chord table to the output path.

        The JSON is written to a temporary file in the destination directory first and only
        replaces the output path once it is complete, so a failed write never leaves a
        half-written table behind.

        Returns: The absolute path of the written file.
        """
        contents = self.serialize(data)
        output_path = self.output_path.absolute()

        tmp_path = None
        with self._file_permission_ctx():
            try:
                fd, tmp_path = tempfile.mkstemp(
                    dir=output_path.parent, prefix=".", suffix=".json.tmp"
                )
                with os.fdopen(fd, "wb") as f:
                    f.write(contents)

                # mkstemp always creates the file as 600
                os.chmod(tmp_path, 0o770 if self.write_with_770_permissions else 0o644)

                os.replace(tmp_path, output_path)
                tmp_path = None
            finally:
                if tmp_path and os.path.exists(tmp_path):
                    os.remove(tmp_path)

        return output_path

    def write_csv(self, df: pd.DataFrame, csv_path: Path) -> Path:
        with self._file_permission_ctx():
            df.to_csv(csv_path, index=False)
        return csv_path.absolute()

    def read(self) -> Dict[str, Any]:
        return json.loads(self.output_path.read_text(encoding="utf-8"))
