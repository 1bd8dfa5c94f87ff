"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers shared by the page objects, the browser manager and the
failure hooks.

================================================================================
"""

import json
from pathlib import Path
from typing import Any

import allure
from loguru import logger


def attach_json(data: Any, name: str = "Data") -> None:
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    allure.attach(
        json.dumps(data, indent=2, default=str),
        name=name,
        attachment_type=allure.attachment_type.JSON,
    )


def attach_text(text: str, name: str = "Text") -> None:
    """Attach text content to Allure report."""
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT,
    )


def attach_png(content: bytes, name: str = "Screenshot") -> None:
    """Attach PNG bytes to Allure report."""
    allure.attach(
        content,
        name=name,
        attachment_type=allure.attachment_type.PNG,
    )


def attach_file(path: Path, name: str = "") -> None:
    """
    Attach a file from disk, picking the attachment type from its extension.

    Playwright traces (.zip) are attached as plain files; open them with
    `playwright show-trace`.
    """
    path = Path(path)
    if not path.exists():
        logger.warning(f"Attachment skipped, file not found: {path}")
        return

    attachment_type = {
        ".png": allure.attachment_type.PNG,
        ".json": allure.attachment_type.JSON,
        ".txt": allure.attachment_type.TEXT,
        ".log": allure.attachment_type.TEXT,
    }.get(path.suffix.lower())

    if attachment_type is None:
        allure.attach.file(str(path), name=name or path.name, extension=path.suffix.lstrip("."))
    else:
        allure.attach.file(str(path), name=name or path.name, attachment_type=attachment_type)


def artifact_name(test_name: str) -> str:
    """Make a test node id safe for use as a file name."""
    safe = "".join(c if c.isalnum() or c in "-_" else "_" for c in test_name)
    return safe.strip("_")[:120] or "test"


__all__ = [
    "attach_json",
    "attach_text",
    "attach_png",
    "attach_file",
    "artifact_name",
]
