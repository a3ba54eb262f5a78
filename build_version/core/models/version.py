"""
Version file models — settings in, generated file and result out.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

Language = Literal["rust", "python", "c"]

DEFAULT_LANGUAGE: Language = "rust"
DEFAULT_OUT_DIR_VAR = "OUT_DIR"


class VersionSettings(BaseModel):
    """Configuration for one version-file write.

    Attributes:
        output_directory: Where ``version.<ext>`` goes. None means "read it
                          from the environment at write time".
        language:         Template used to render the constant.
        out_dir_var:      Environment variable that supplies the directory.
    """

    model_config = ConfigDict(extra="forbid")

    output_directory: Path | None = None
    language: Language = DEFAULT_LANGUAGE
    out_dir_var: str = DEFAULT_OUT_DIR_VAR


class GeneratedFile(BaseModel):
    """A rendered version file, not yet synced to disk.

    Attributes:
        path:    Absolute target path.
        content: Full file content.
        reason:  Why this file was generated.
    """

    path: Path
    content: str
    reason: str = ""


class WriteResult(BaseModel):
    """Outcome of ``write_version_file``."""

    path: Path
    language: Language
    version: str | None = None
    written: bool = False

    def to_dict(self) -> dict:
        return {
            "path": str(self.path),
            "language": self.language,
            "version": self.version,
            "written": self.written,
        }
