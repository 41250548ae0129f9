# bingwallpaper

Downloads Bing's daily wallpapers into a local directory. It can also save the raw JSON metadata that the Bing image archive returns for each wallpaper. It uses only the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

To run the tests, install with the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Command line

```
bingwallpaper [options]
```

The same command can be run as `python -m bingwallpaper.cli`. Every option can be written with one dash or two, so `-days 3` and `--days 3` mean the same thing.

| Option | Default | Meaning |
| --- | --- | --- |
| `-dir DIR` | `./bing_wallpapers` | Directory the wallpapers are saved in (created if missing) |
| `-days N` | `7` | How many recent days to download, 1 to 16 |
| `-hd` | on | Ask for the UHD image instead of 1920x1080; turn off with `-hd=false` |
| `-json` | off | Also save the raw API JSON for each wallpaper |
| `-locale LOCALE` | `zh-CN` | Market to fetch from (`zh-CN`, `en-US`, `ja-JP`, …) |
| `-log-level LEVEL` | `info` | `debug`, `info`, `warning` or `error`; anything else prints a warning and uses `info` |
| `-no-time` | off | Leave timestamps out of log lines |
| `-last` | off | Download only the most recent wallpaper |
| `-name NAME` | | Save the image under this file name; `.jpg` is added when the name has no extension |
| `-overwrite` | off | With `-name`, replace the file if it already exists |
| `-version` | | Print version information and exit |

Boolean options take an optional value: `-json`, `-json=true` and `-json=false` are all accepted. The values `1`, `t`, `true` and `0`, `f`, `false` are also accepted, in any of the cases `true`, `True` and `TRUE`.

Examples:

```
bingwallpaper -days 3 -locale en-US
bingwallpaper -last -name today -overwrite -json
```

By default, an image is saved as `<startdate>_<description>.jpg`. The description is the wallpaper's title. When the title is empty, the description is taken from the copyright text. Characters that are awkward in file names are replaced or dropped. With `-json`, the metadata is saved as `bing_data_<startdate>.json`.

All wallpapers listed in one API response are fetched together. They are then downloaded one after another, with a one-second pause between downloads. If a wallpaper fails, the others are still downloaded.

When the run ends, the command prints how many wallpapers were downloaded and how many failed. With `-last` it also prints the wallpaper's title, date, description, saved path and, if saved, the metadata path.

Exit status:

- `0` on success.
- `1` when `-days` is out of range.
- `1` when the `-name` target already exists and `-overwrite` is not given.
- `1` when the download fails.
- `2` when the options cannot be parsed.

## Library use

```python
from bingwallpaper.client import Client
from bingwallpaper.downloader import Downloader, DownloadError
from bingwallpaper.logger import Logger, LogLevel
from bingwallpaper.storage import BingImageStorage

logger = Logger(LogLevel.INFO, show_time=False)
client = Client(locale="en-US", logger=logger)
storage = BingImageStorage("wallpapers", logger)
downloader = Downloader(client, storage, save_json=False)

try:
    results = downloader.download_latest_wallpapers(3, True)
except DownloadError as exc:
    results = exc.results  # whatever was processed despite the failures
for result in results:
    print(result.ok, result.image_path)
```

### Modules

- **`bingwallpaper.client`**
  - `Client` takes these keyword arguments: `base_url`, `timeout` (seconds, default 10), `user_agent`, `locale`, `high_quality`, `logger` and `image_host`.
  - `image_url(image)` and `api_url(days_ago, count)` build request URLs.
  - `fetch_image_data(days_ago)` returns one day's `ImageData`.
  - `fetch_multiple_image_data(days)` returns several days' `ImageData`. It raises `ValueError` unless `days` is 1–16.
  - `fetch_raw_image_data(image)` and `fetch_raw_json_data(api_url)` return the raw bytes.
  - `parse_image_response(data)` decodes an API response.
  - A failed request, a non-200 status, bad JSON or an empty image list raises `BingClientError`.
- **`bingwallpaper.downloader`**
  - `Downloader(client, storage, save_json=True, delay=1.0)` has these methods:
    - `fetch_and_save_wallpaper(days_ago)`
    - `save_wallpaper(image, days_ago)`
    - `fetch_and_save_wallpapers(days, continue_on_error)`
    - `save_wallpapers(images, continue_on_error)`
    - `download_latest_wallpapers(days, continue_on_error)`
  - Each call returns `DownloadResult` objects. Each result has `image`, `image_path`, `json_path`, `download_error`, `json_error` and `ok`.
  - A failure raises `DownloadError`, whose `results` holds the results gathered so far.
  - A failure to fetch or save the JSON metadata does not raise. It is only recorded in `json_error`.
- **`bingwallpaper.storage`**
  - `FileStorage` has `save(data, path)`, `save_stream(stream, path)` and `exists(path)`. It creates parent directories as needed. Write failures raise `StorageError`.
  - `DefaultFilenameGenerator` has `image_filename(image, base_path)` and `json_filename(image, base_path)`.
  - `BingImageStorage(output_dir, logger)` has `save_image`, `save_image_from_stream` and `save_json`. Each returns the path it wrote.
  - Its `generator` attribute can be replaced with any object that has the two filename methods.
- **`bingwallpaper.models`**
  - Defines the `ImageData`, `Tooltips` and `ArchiveResponse` dataclasses.
  - Each has a `from_dict(data)` constructor that reads a decoded JSON object.
  - A field of the wrong type raises `ValueError`.
- **`bingwallpaper.logger`**
  - Defines `LogLevel` (`DEBUG`, `INFO`, `WARNING`, `ERROR`).
  - `Logger(level, show_time=True, show_level=True, writer=None)` writes lines to `writer`, or to standard output when `writer` is `None`. Messages use `%`-style arguments.
  - `NullLogger` discards everything.
- **`bingwallpaper.utils`**
  - `format_date` turns `YYYYMMDD` into a readable date.
  - `format_full_datetime` turns `YYYYMMDDHHMM` into a readable date and time.
  - Both raise `ValueError` on input that is too short.
  - Also provides `image_summary`, `today_date_string`, `is_image_from_today` and `extract_wallpaper_description`.
- **`bingwallpaper.cli`**
  - `main(argv=None)` runs the command and returns its exit status.
  - `CustomFilenameGenerator` saves every image under one fixed name.

## What it does not do

The package only downloads wallpapers and their metadata into a directory. It does not:

- set the desktop background;
- run on a schedule;
- retry failed requests;
- skip wallpapers that are already on disk, except for the `-name` check described above.