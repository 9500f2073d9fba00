from jpegscrub.type_finder import (
    BINARY_CAPS,
    HeaderAnalyzer,
    HeaderDetector,
    header_sample_to_hex,
    sniff_caps,
)


def test_detect_jfif():
    data = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01"
    caps = HeaderAnalyzer().detect(data)
    assert caps.media_type == "image/jpeg"
    assert caps.params["container"] == "jfif"


def test_detect_exif():
    data = b"\xff\xd8\xff\xe1\x00\x20Exif\x00\x00MM"
    caps = HeaderAnalyzer().detect(data)
    assert caps.params["container"] == "exif"
    assert "jpg" in caps.extensions


def test_detect_bare_jpeg():
    caps = HeaderAnalyzer().detect(b"\xff\xd8\xff\xd9")
    assert caps.params["container"] == "jpeg"


def test_detect_unknown():
    assert HeaderAnalyzer().detect(b"\x89PNG\r\n\x1a\n") is None
    assert HeaderAnalyzer().detect(b"") is None


def test_sniff_caps_falls_back_to_binary():
    assert sniff_caps(b"GIF89a") is BINARY_CAPS
    assert sniff_caps(b"\xff\xd8\xff\xd9").media_type == "image/jpeg"


def test_custom_detectors():
    marker = BINARY_CAPS.merge_params({"container": "custom"})
    analyzer = HeaderAnalyzer([HeaderDetector("custom", lambda data: data == b"x", marker)])
    assert analyzer.detect(b"x") is marker
    assert analyzer.detect(b"\xff\xd8\xff") is None


def test_header_sample_to_hex():
    assert header_sample_to_hex(b"\xff\xd8\xff\xe0", max_len=3) == "ff d8 ff"
