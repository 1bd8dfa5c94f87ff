"""
================================================================================
Upload File Factory
================================================================================

Materializes the documents uploaded by the claim scenarios.

The portal only inspects extension/MIME type and size, so the generated
files are minimal but well-formed (a one-page PDF, a 1x1 JPEG, a zip archive).
The oversized archive is written sparse so it costs no real disk space.

================================================================================
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Dict

from loguru import logger


# Portal-side upload limits and messages
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
INVALID_FILE_TYPE_MESSAGE = "Invalid file type. Please upload images or PDF files only"
FILE_TOO_LARGE_MESSAGE = "File size exceeds 10MB limit"

# Extensions accepted by every upload slot
ACCEPTED_EXTENSIONS = (".pdf", ".jpg", ".jpeg", ".png", ".zip")

_MINIMAL_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj<</Type/Catalog/Pages 2 0 R>>endobj\n"
    b"2 0 obj<</Type/Pages/Kids[3 0 R]/Count 1>>endobj\n"
    b"3 0 obj<</Type/Page/Parent 2 0 R/MediaBox[0 0 612 792]>>endobj\n"
    b"trailer<</Root 1 0 R>>\n"
    b"%%EOF\n"
)

# 1x1 white baseline JPEG
_MINIMAL_JPEG = bytes.fromhex(
    "ffd8ffe000104a46494600010100000100010000ffdb004300080606070605080707"
    "070909080a0c140d0c0b0b0c1912130f141d1a1f1e1d1a1c1c20242e2720222c231c"
    "1c2837292c30313434341f27393d38323c2e333432ffc0000b080001000101011100"
    "ffc4001f0000010501010101010100000000000000000102030405060708090a0bff"
    "c400b5100002010303020403050504040000017d01020300041105122131410613"
    "516107227114328191a1082342b1c11552d1f02433627282090a161718191a2526"
    "2728292a3435363738393a434445464748494a535455565758595a636465666768"
    "696a737475767778797a838485868788898a92939495969798999aa2a3a4a5a6a7"
    "a8a9aab2b3b4b5b6b7b8b9bac2c3c4c5c6c7c8c9cad2d3d4d5d6d7d8d9dae1e2e3"
    "e4e5e6e7e8e9eaf1f2f3f4f5f6f7f8f9faffda0008010100003f00fbd3ffd9"
)


class UploadFileFactory:
    """
    Writes upload fixtures into a directory and hands back their paths.

    Usage:
        files = UploadFileFactory(tmp_path)
        page.upload_document("police-report", files.path("police-report.pdf"))
    """

    # Scenario file name -> generator method
    DOCUMENTS: Dict[str, str] = {
        "accident-photos.zip": "_write_zip",
        "police-report.pdf": "_write_pdf",
        "repair-estimate.pdf": "_write_pdf",
        "theft-police-report.pdf": "_write_pdf",
        "vehicle-registration.pdf": "_write_pdf",
        "keys-in-possession.jpg": "_write_jpeg",
        "invalid-file.txt": "_write_text",
        "large-file.zip": "_write_oversized",
    }

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def path(self, name: str) -> Path:
        """
        Return the path of a scenario file, creating it on first use.

        Raises:
            KeyError: If the name is not a known scenario file
        """
        if name not in self.DOCUMENTS:
            raise KeyError(
                f"Unknown upload fixture: {name}. "
                f"Known: {', '.join(sorted(self.DOCUMENTS))}"
            )
        target = self.directory / name
        if not target.exists():
            getattr(self, self.DOCUMENTS[name])(target)
            logger.debug(f"Created upload fixture: {target} ({target.stat().st_size} bytes)")
        return target

    def create_all(self) -> Dict[str, Path]:
        return {name: self.path(name) for name in self.DOCUMENTS}

    # =========================================================================
    # Writers
    # =========================================================================

    def _write_pdf(self, target: Path) -> None:
        target.write_bytes(_MINIMAL_PDF)

    def _write_jpeg(self, target: Path) -> None:
        target.write_bytes(_MINIMAL_JPEG)

    def _write_text(self, target: Path) -> None:
        target.write_text("Plain text is not an accepted claim document.\n", encoding="utf-8")

    def _write_zip(self, target: Path) -> None:
        with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            archive.writestr("front-bumper.jpg", _MINIMAL_JPEG)
            archive.writestr("rear-bumper.jpg", _MINIMAL_JPEG)

    def _write_oversized(self, target: Path) -> None:
        self._write_zip(target)
        with open(target, "r+b") as f:
            f.truncate(MAX_UPLOAD_BYTES + 1024 * 1024)


__all__ = [
    "UploadFileFactory",
    "MAX_UPLOAD_BYTES",
    "ACCEPTED_EXTENSIONS",
    "INVALID_FILE_TYPE_MESSAGE",
    "FILE_TOO_LARGE_MESSAGE",
]
