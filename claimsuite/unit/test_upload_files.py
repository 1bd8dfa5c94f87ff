import zipfile

import pytest

from claimsuite.ui_testing.data.upload_files import (
    ACCEPTED_EXTENSIONS,
    MAX_UPLOAD_BYTES,
    UploadFileFactory,
)


def test_valid_documents_are_accepted_types_under_limit(tmp_path):
    files = UploadFileFactory(tmp_path)

    for name in ("accident-photos.zip", "police-report.pdf", "keys-in-possession.jpg"):
        path = files.path(name)
        assert path.suffix in ACCEPTED_EXTENSIONS
        assert 0 < path.stat().st_size <= MAX_UPLOAD_BYTES


def test_generated_formats_are_well_formed(tmp_path):
    files = UploadFileFactory(tmp_path)

    assert files.path("police-report.pdf").read_bytes().startswith(b"%PDF-")
    assert files.path("keys-in-possession.jpg").read_bytes()[:2] == b"\xff\xd8"
    with zipfile.ZipFile(files.path("accident-photos.zip")) as archive:
        assert len(archive.namelist()) == 2


def test_invalid_file_has_rejected_extension(tmp_path):
    path = UploadFileFactory(tmp_path).path("invalid-file.txt")

    assert path.suffix not in ACCEPTED_EXTENSIONS


def test_large_file_exceeds_limit(tmp_path):
    path = UploadFileFactory(tmp_path).path("large-file.zip")

    assert path.suffix in ACCEPTED_EXTENSIONS
    assert path.stat().st_size > MAX_UPLOAD_BYTES


def test_files_are_created_once(tmp_path):
    files = UploadFileFactory(tmp_path)
    path = files.path("repair-estimate.pdf")
    path.write_bytes(b"%PDF-1.4 edited")

    assert files.path("repair-estimate.pdf").read_bytes() == b"%PDF-1.4 edited"


def test_unknown_fixture_name(tmp_path):
    with pytest.raises(KeyError, match="invoice.pdf"):
        UploadFileFactory(tmp_path).path("invoice.pdf")


def test_create_all(tmp_path):
    created = UploadFileFactory(tmp_path / "nested").create_all()

    assert set(created) == set(UploadFileFactory.DOCUMENTS)
    assert all(path.exists() for path in created.values())
