import json
import os
import urllib.error
from unittest import mock

import pytest

from bingwallpaper.cli import CustomFilenameGenerator, main
from bingwallpaper.models import ImageData

API_BODY = json.dumps(
    {
        "images": [
            {
                "startdate": "20240101",
                "url": "/th?id=OHR.Hill_1920x1080.jpg",
                "title": "Sunny Hill",
                "copyright": "Hill (© Someone)",
            }
        ]
    }
).encode()


class _Response:
    def __init__(self, body):
        self.status = 200
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeNet:
    def __init__(self, fail=False):
        self.fail = fail
        self.urls = []

    def __call__(self, request, timeout=None):
        self.urls.append(request.full_url)
        if self.fail:
            raise urllib.error.URLError("offline")
        if "HPImageArchive" in request.full_url:
            return _Response(API_BODY)
        return _Response(b"JPEGDATA")


def test_version_flag(capsys):
    assert main(["-version"]) == 0
    assert "BingWallpaper 版本: dev" in capsys.readouterr().out


@pytest.mark.parametrize("days", ["0", "17"])
def test_days_out_of_range(capsys, days):
    assert main(["-days", days]) == 1
    assert "days参数必须在1到16之间" in capsys.readouterr().out


def test_existing_custom_file_without_overwrite(tmp_path, capsys):
    (tmp_path / "mine.jpg").write_bytes(b"old")
    assert main(["-dir", str(tmp_path), "-name", "mine", "-last"]) == 1
    assert "已存在" in capsys.readouterr().out
    assert (tmp_path / "mine.jpg").read_bytes() == b"old"


def test_last_with_custom_name(tmp_path, capsys):
    net = FakeNet()
    with mock.patch("urllib.request.urlopen", side_effect=net):
        code = main(["-dir", str(tmp_path), "-name", "mine", "-last", "-no-time"])
    assert code == 0
    assert (tmp_path / "mine.jpg").read_bytes() == b"JPEGDATA"
    out = capsys.readouterr().out
    assert "下载完成: 成功1张，失败0张" in out
    assert "标题: Sunny Hill" in out
    assert any("UHD" in url for url in net.urls)


def test_overwrite_replaces_existing(tmp_path):
    (tmp_path / "mine.jpg").write_bytes(b"old")
    with mock.patch("urllib.request.urlopen", side_effect=FakeNet()):
        code = main(["-dir", str(tmp_path), "-name", "mine.jpg", "-last", "-overwrite"])
    assert code == 0
    assert (tmp_path / "mine.jpg").read_bytes() == b"JPEGDATA"


def test_batch_with_json_and_no_hd(tmp_path, capsys):
    net = FakeNet()
    with mock.patch("urllib.request.urlopen", side_effect=net):
        code = main(["-dir", str(tmp_path), "-days", "1", "-json", "-hd=false", "-log-level", "bogus"])
    assert code == 0
    names = sorted(os.listdir(tmp_path))
    assert "bing_data_20240101.json" in names
    assert "20240101_Sunny_Hill.jpg" in names
    assert any("1920x1080" in url for url in net.urls)
    out = capsys.readouterr().out
    assert "无效的日志级别 'bogus'" in out


def test_network_failure_reports_error(tmp_path, capsys):
    with mock.patch("urllib.request.urlopen", side_effect=FakeNet(fail=True)):
        code = main(["-dir", str(tmp_path), "-last"])
    assert code == 1
    assert "错误:" in capsys.readouterr().out


def test_custom_generator_adds_extension(tmp_path):
    generator = CustomFilenameGenerator(custom_filename="wall")
    assert generator.image_filename(ImageData(), str(tmp_path)) == os.path.join(str(tmp_path), "wall.jpg")


def test_custom_generator_keeps_extension(tmp_path):
    generator = CustomFilenameGenerator(custom_filename="wall.png")
    assert generator.image_filename(ImageData(), str(tmp_path)) == os.path.join(str(tmp_path), "wall.png")


def test_custom_generator_falls_back_to_default(tmp_path):
    generator = CustomFilenameGenerator()
    image = ImageData(startdate="20240101", title="Sunny Hill")
    path = generator.image_filename(image, str(tmp_path))
    assert os.path.basename(path) == "20240101_Sunny_Hill.jpg"
    assert os.path.basename(generator.json_filename(image, str(tmp_path))) == "bing_data_20240101.json"