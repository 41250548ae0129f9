import json

import pytest

from bingwallpaper.models import ArchiveResponse, ImageData, Tooltips

SAMPLE = """
{
  "images": [
    {
      "startdate": "20240101",
      "fullstartdate": "202401011600",
      "enddate": "20240102",
      "url": "/th?id=OHR.Sample_1920x1080.jpg",
      "urlbase": "/th?id=OHR.Sample",
      "copyright": "Sample place (c) Someone",
      "copyrightlink": "https://example.com/search",
      "title": "Sample",
      "quiz": "/search?q=quiz",
      "wp": true,
      "hsh": "abc123",
      "drk": 1,
      "top": 2,
      "bot": 3,
      "hs": ["x"]
    }
  ],
  "tooltips": {
    "loading": "Loading...",
    "previous": "Prev",
    "next": "Next",
    "walle": "unavailable",
    "walls": "download"
  }
}
"""


def test_archive_response_from_sample():
    resp = ArchiveResponse.from_dict(json.loads(SAMPLE))
    assert len(resp.images) == 1
    image = resp.images[0]
    assert image.startdate == "20240101"
    assert image.fullstartdate == "202401011600"
    assert image.url == "/th?id=OHR.Sample_1920x1080.jpg"
    assert image.title == "Sample"
    assert image.wp is True
    assert (image.drk, image.top, image.bot) == (1, 2, 3)
    assert image.hs == ["x"]
    assert resp.tooltips.loading == "Loading..."
    assert resp.tooltips.walls == "download"


def test_image_defaults_when_missing():
    image = ImageData.from_dict({})
    assert image == ImageData()
    assert image.hs == []
    assert image.wp is False


def test_image_null_fields_take_defaults():
    image = ImageData.from_dict({"title": None, "drk": None, "hs": None})
    assert image.title == ""
    assert image.drk == 0
    assert image.hs == []


def test_unknown_keys_ignored():
    image = ImageData.from_dict({"title": "T", "extra": 5})
    assert image == ImageData(title="T")


@pytest.mark.parametrize(
    "data",
    [
        {"title": 5},
        {"wp": "yes"},
        {"drk": "1"},
        {"drk": True},
        {"hs": "abc"},
        {"hs": [1]},
    ],
)
def test_image_type_mismatch_raises(data):
    with pytest.raises(ValueError):
        ImageData.from_dict(data)


def test_image_non_mapping_raises():
    with pytest.raises(ValueError):
        ImageData.from_dict(["not", "a", "dict"])


def test_tooltips_from_dict():
    tips = Tooltips.from_dict({"next": "N", "previous": "P"})
    assert tips == Tooltips(previous="P", next="N")


def test_archive_without_images():
    resp = ArchiveResponse.from_dict({})
    assert resp.images == []
    assert resp.tooltips == Tooltips()


def test_archive_images_wrong_type():
    with pytest.raises(ValueError):
        ArchiveResponse.from_dict({"images": {"a": 1}})


def test_archive_non_mapping():
    with pytest.raises(ValueError):
        ArchiveResponse.from_dict("text")