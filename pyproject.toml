[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bingwallpaper"
version = "0.1.0"
description = "Download Bing daily wallpapers and their metadata"
requires-python = ">=3.10"
dependencies = []
keywords = ["bing", "wallpaper", "download", "images", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bingwallpaper = "bingwallpaper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bingwallpaper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
