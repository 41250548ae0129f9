"""Command line entry point for downloading Bing wallpapers."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Sequence

from .client import MAX_DAYS, Client
from .downloader import Downloader, DownloadError, DownloadResult
from .logger import Logger, LogLevel, NullLogger
from .models import ImageData
from .storage import BingImageStorage, DefaultFilenameGenerator
from .utils import format_date

VERSION = "dev"
BUILD_TIME = "unknown"
COMMIT_SHA = "unknown"

_LEVELS = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "warning": LogLevel.WARNING,
    "error": LogLevel.ERROR,
}

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


def _has_extension(name: str) -> bool:
    return "." in os.path.basename(name)


def _with_extension(name: str) -> str:
    return name if _has_extension(name) else name + ".jpg"


class CustomFilenameGenerator(DefaultFilenameGenerator):
    """Uses a fixed file name for images when one is given."""

    def __init__(
        self, logger: Logger | NullLogger | None = None, custom_filename: str = ""
    ) -> None:
        super().__init__(logger)
        self.custom_filename = custom_filename

    def image_filename(self, image: ImageData, base_path: str | os.PathLike) -> str:
        if self.custom_filename:
            return os.path.join(os.fspath(base_path), _with_extension(self.custom_filename))
        return super().image_filename(image, base_path)


def _parse_bool(text: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bingwallpaper", description="下载 Bing 每日壁纸")

    def flag(name: str, default: bool, help_text: str) -> None:
        parser.add_argument(
            f"-{name}", f"--{name}", dest=name.replace("-", "_"), nargs="?",
            const=True, default=default, type=_parse_bool, help=help_text,
        )

    parser.add_argument("-dir", "--dir", dest="dir", default="./bing_wallpapers", help="壁纸保存目录")
    parser.add_argument("-days", "--days", dest="days", type=int, default=7, help="下载最近几天的壁纸 (1-16)")
    flag("hd", True, "下载高清壁纸")
    flag("json", False, "保存原始JSON数据")
    parser.add_argument("-locale", "--locale", dest="locale", default="zh-CN",
                        help="语言区域 (zh-CN, en-US, ja-JP 等)")
    parser.add_argument("-log-level", "--log-level", dest="log_level", default="info",
                        help="日志级别 (debug, info, warning, error)")
    flag("no-time", False, "日志中不显示时间戳")
    flag("version", False, "显示版本信息并退出")
    flag("last", False, "仅下载最后一天的壁纸")
    parser.add_argument("-name", "--name", dest="name", default="",
                        help="指定保存的文件名 (如 my-wallpaper.jpg)")
    flag("overwrite", False, "如果文件已存在则覆盖")
    return parser


def _print_details(result: DownloadResult, save_json: bool) -> None:
    image = result.image
    print("\n壁纸详情:")
    print(f"标题: {image.title}")
    try:
        print(f"日期: {format_date(image.startdate)}")
    except ValueError:
        pass
    print(f"描述: {image.copyright}")
    print(f"保存路径: {result.image_path}")
    if save_json and result.json_path:
        print(f"元数据: {result.json_path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the downloader; returns the process exit status."""
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else list(argv))

    if args.version:
        print(f"BingWallpaper 版本: {VERSION} (构建于: {BUILD_TIME}, 提交: {COMMIT_SHA})\n")
        return 0

    days = 1 if args.last else args.days
    if days < 1 or days > MAX_DAYS:
        print("错误: days参数必须在1到16之间")
        return 1

    output_dir = os.path.abspath(args.dir)

    level = _LEVELS.get(args.log_level)
    if level is None:
        print(f"警告: 无效的日志级别 '{args.log_level}'，使用默认级别 'info'")
        level = LogLevel.INFO

    logger = Logger(level, show_time=not args.no_time)
    client = Client(
        high_quality=args.hd, locale=args.locale, timeout=15.0, logger=logger
    )
    storage = BingImageStorage(output_dir, logger)

    if args.name:
        storage.generator = CustomFilenameGenerator(logger, args.name)
        if not args.overwrite:
            target = _with_extension(os.path.join(output_dir, args.name))
            if os.path.exists(target):
                print(f"错误: 文件 {target} 已存在。使用 -overwrite 选项覆盖现有文件。")
                return 1

    downloader = Downloader(client, storage, save_json=args.json)

    try:
        if args.last:
            logger.info("仅下载最后一天的壁纸")
            results = [downloader.fetch_and_save_wallpaper(0)]
        else:
            results = downloader.download_latest_wallpapers(days, True)
    except Exception as exc:  # noqa: BLE001 - any failure ends the run with a message
        print(f"错误: {exc}")
        return 1

    success = sum(1 for result in results if result.ok)
    failed = len(results) - success
    print(f"\n下载完成: 成功{success}张，失败{failed}张")

    if args.last and results and results[0].ok:
        _print_details(results[0], args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())