import json

from jpegscrub.caps import Caps, summarize_caps


def test_caps_creation_and_label():
    caps = Caps(
        media_type="image/jpeg",
        name="jpeg",
        params={"description": "JPEG Image", "extensions": ["jpg", "jpeg"]},
    )
    assert caps.media_type == "image/jpeg"
    assert caps.name == "jpeg"
    assert caps.label() == "jpeg"
    assert caps.uri == "urn:jpegscrub:caps#jpeg"
    assert caps.params["description"] == "JPEG Image"
    assert set(caps.extensions) == {"jpg", "jpeg"}


def test_caps_label_fallbacks():
    assert Caps(media_type="image/jpeg").label() == "image/jpeg"
    assert Caps().label() == "unknown"


def test_caps_generic_params_keep_type():
    caps = Caps("image/jpeg", "jpeg", params={"bytes_removed": 42, "container": "exif"})
    assert caps.params["bytes_removed"] == 42
    assert caps.params["container"] == "exif"


def test_merge_params_returns_new_caps():
    caps = Caps("image/jpeg", "jpeg", params={"container": "jfif"})
    merged = caps.merge_params({"segments_removed": 2})

    assert merged is not caps
    assert "segments_removed" not in caps.params
    assert merged.params["segments_removed"] == 2
    assert merged.params["container"] == "jfif"
    assert merged.uri == caps.uri


def test_caps_equality():
    assert Caps("image/jpeg", "jpeg") == Caps("image/jpeg", "jpeg")
    assert Caps("image/jpeg", "jpeg") != Caps("image/png", "png")


def test_summarize_caps():
    caps = Caps("image/jpeg", "jpeg", params={"description": "JPEG", "bytes_removed": 7})
    summary = json.loads(summarize_caps(caps, source="photo.jpg"))

    assert summary["media_type"] == "image/jpeg"
    assert summary["name"] == "jpeg"
    assert summary["description"] == "JPEG"
    assert summary["bytes_removed"] == 7
    assert summary["source"] == "photo.jpg"
