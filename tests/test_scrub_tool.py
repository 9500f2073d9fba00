import importlib.util
import io
import json
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

TOOL = Path(__file__).resolve().parents[1] / "tools" / "scrub.py"
_spec = importlib.util.spec_from_file_location("scrub_tool", TOOL)
scrub_tool = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(scrub_tool)

PHOTO = (
    b"\xff\xd8"
    b"\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
    b"\xff\xe1\x00\x08Exif\x00\x00"
    b"\xff\xdb\x00\x03\x00"
    b"\xff\xda\x00\x02\x11\xff\xe1\x00\x04"
    b"\xff\xd9"
)
SCRUBBED = (
    b"\xff\xd8"
    b"\xff\xdb\x00\x03\x00"
    b"\xff\xda\x00\x02\x11\xff\xe1\x00\x04"
    b"\xff\xd9"
)


@pytest.fixture
def photo(tmp_path):
    path = tmp_path / "photo.jpg"
    path.write_bytes(PHOTO)
    return path


def test_stdin_to_stdout():
    out = io.BytesIO()
    assert scrub_tool.main([], stdin=io.BytesIO(PHOTO), stdout=out) == 0
    assert out.getvalue() == SCRUBBED


def test_file_to_stdout(photo):
    out = io.BytesIO()
    assert scrub_tool.main([str(photo)], stdout=out) == 0
    assert out.getvalue() == SCRUBBED
    assert photo.read_bytes() == PHOTO


def test_in_place(photo):
    out = io.BytesIO()
    assert scrub_tool.main(["-i", str(photo)], stdout=out) == 0
    assert photo.read_bytes() == SCRUBBED
    assert out.getvalue() == b""


def test_in_place_needs_file(capsys):
    assert scrub_tool.main(["-i"], stdin=io.BytesIO(PHOTO)) == 1
    assert "cannot overwrite standard input" in capsys.readouterr().err


def test_malformed_file_left_untouched(tmp_path, capsys):
    path = tmp_path / "broken.jpg"
    broken = PHOTO[:30]
    path.write_bytes(broken)
    out = io.BytesIO()

    assert scrub_tool.main(["-i", str(path)], stdout=out) == 1

    assert path.read_bytes() == broken
    assert out.getvalue() == b""
    assert "[error] premature end of input" in capsys.readouterr().err


def test_not_a_jpeg(capsys):
    out = io.BytesIO()
    assert scrub_tool.main([], stdin=io.BytesIO(b"\x89PNG\r\n"), stdout=out) == 1
    assert out.getvalue() == b""
    assert "expecting marker" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert scrub_tool.main([str(tmp_path / "nope.jpg")]) == 1
    assert "resource does not exist" in capsys.readouterr().err


def test_too_many_arguments(photo):
    with pytest.raises(SystemExit) as excinfo:
        scrub_tool.main([str(photo), str(photo)])
    assert excinfo.value.code == 2


def test_unknown_flag():
    with pytest.raises(SystemExit) as excinfo:
        scrub_tool.main(["-x"])
    assert excinfo.value.code == 2


def test_verbose_summary(photo, caplog):
    caplog.set_level(logging.INFO)
    assert scrub_tool.main(["-v", str(photo)], stdout=io.BytesIO()) == 0

    summaries = [r.getMessage() for r in caplog.records if r.name == "scrub"]
    assert len(summaries) == 1
    summary = json.loads(summaries[0])
    assert summary["segments_removed"] == 2
    assert summary["source"] == str(photo)


def test_zero_byte_warning(caplog):
    out = io.BytesIO()
    data = b"\xff\xd8\x00\xff\xd9"
    assert scrub_tool.main([], stdin=io.BytesIO(data), stdout=out) == 0
    assert out.getvalue() == data
    assert "skipping zero byte" in caplog.text


def test_in_place_keeps_file_mode(photo):
    os.chmod(photo, 0o640)
    assert scrub_tool.main(["-i", str(photo)], stdout=io.BytesIO()) == 0
    assert photo.read_bytes() == SCRUBBED
    assert os.stat(photo).st_mode & 0o777 == 0o640
    assert os.listdir(photo.parent) == ["photo.jpg"]


def test_failed_rewrite_keeps_original(photo, capsys):
    with patch("os.replace", side_effect=OSError("disk full")):
        assert scrub_tool.main(["-i", str(photo)], stdout=io.BytesIO()) == 1

    assert photo.read_bytes() == PHOTO
    assert os.listdir(photo.parent) == ["photo.jpg"]
    assert "[error] disk full" in capsys.readouterr().err
