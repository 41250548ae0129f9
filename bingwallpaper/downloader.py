"""Coordinates fetching wallpapers from Bing and saving them to storage."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterable, Sequence

from .client import MAX_DAYS, BingClientError, Client
from .models import ImageData
from .storage import BingImageStorage, StorageError


@dataclass
class DownloadResult:
    """Outcome of processing one wallpaper."""

    image: ImageData
    image_path: str = ""
    json_path: str = ""
    download_error: Exception | None = None
    json_error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.download_error is None


class DownloadError(Exception):
    """Raised when one or more wallpapers could not be downloaded.

    ``results`` holds whatever was processed before or despite the failure.
    """

    def __init__(self, message: str, results: Iterable[DownloadResult] = ()) -> None:
        super().__init__(message)
        self.results: list[DownloadResult] = list(results)


class Downloader:
    """Fetches wallpapers with a client and writes them with a storage."""

    def __init__(
        self,
        client: Client,
        storage: BingImageStorage,
        *,
        save_json: bool = True,
        delay: float = 1.0,
    ) -> None:
        self.client = client
        self.storage = storage
        self.logger = client.logger
        self.save_json = save_json
        self.delay = delay

    def fetch_and_save_wallpaper(self, days_ago: int) -> DownloadResult:
        """Fetch the wallpaper from ``days_ago`` days back and save it."""
        self.logger.info("===== 开始处理 %d 天前的壁纸 =====", days_ago)
        try:
            image = self.client.fetch_image_data(days_ago)
        except BingClientError as exc:
            self.logger.error("获取图片数据失败: %s", exc)
            raise DownloadError(f"获取图片数据失败: {exc}") from exc
        return self.save_wallpaper(image, days_ago)

    def save_wallpaper(self, image: ImageData, days_ago: int) -> DownloadResult:
        """Download and save one wallpaper whose metadata is already known.

        A failed image download raises DownloadError carrying the partial result;
        a failed JSON save is only recorded on the result.
        """
        result = DownloadResult(image=image)

        self.logger.info("下载并保存图片...")
        try:
            image_bytes = self.client.fetch_raw_image_data(image)
        except BingClientError as exc:
            result.download_error = exc
            self.logger.warning("图片下载失败: %s", exc)
            raise DownloadError(f"图片下载失败: {exc}", [result]) from exc

        try:
            image_path = self.storage.save_image(image_bytes, image)
        except StorageError as exc:
            result.download_error = exc
            self.logger.warning("图片保存失败: %s", exc)
            raise DownloadError(f"图片保存失败: {exc}", [result]) from exc

        result.image_path = image_path
        self.logger.info("图片已保存到: %s", image_path)

        if self.save_json:
            self._save_json(result, image, days_ago)
        else:
            self.logger.debug("跳过 JSON 数据保存（已禁用）")

        self.logger.info("===== 壁纸处理完成 =====")
        return result

    def _save_json(self, result: DownloadResult, image: ImageData, days_ago: int) -> None:
        self.logger.info("下载并保存 JSON 数据...")
        try:
            json_bytes = self.client.fetch_raw_json_data(self.client.api_url(days_ago, 1))
        except BingClientError as exc:
            result.json_error = exc
            self.logger.warning("JSON 数据获取失败: %s", exc)
            return
        try:
            json_path = self.storage.save_json(json_bytes, image)
        except StorageError as exc:
            result.json_error = exc
            self.logger.warning("JSON 数据保存失败: %s", exc)
            return
        result.json_path = json_path
        self.logger.info("JSON 数据已保存到: %s", json_path)

    def _pause(self) -> None:
        self.logger.debug("等待1秒后继续...")
        if self.delay > 0:
            time.sleep(self.delay)

    def fetch_and_save_wallpapers(
        self, days: int, continue_on_error: bool
    ) -> list[DownloadResult]:
        """Fetch and save the last ``days`` wallpapers one request at a time."""
        results: list[DownloadResult] = []
        last_error: DownloadError | None = None

        self.logger.info("开始处理最近 %d 天的壁纸", days)
        for day in range(days):
            try:
                results.append(self.fetch_and_save_wallpaper(day))
            except DownloadError as exc:
                self.logger.error("处理第 %d 天的壁纸失败: %s", day, exc)
                last_error = DownloadError(f"处理第 %d 天的壁纸失败: {exc}" % day)
                if not continue_on_error:
                    raise DownloadError(str(last_error), results) from exc
                results.extend(exc.results)
            if day < days - 1:
                self._pause()

        self.logger.info("所有壁纸处理完成！共 %d 张，成功 %d 张", days, len(results))
        if last_error is not None:
            raise DownloadError(f"有部分壁纸处理失败: {last_error}", results)
        return results

    def save_wallpapers(
        self, images: Sequence[ImageData], continue_on_error: bool
    ) -> list[DownloadResult]:
        """Save wallpapers whose metadata is known, assumed ordered newest first."""
        results: list[DownloadResult] = []
        last_error: DownloadError | None = None
        total = len(images)

        self.logger.info("开始处理 %d 张壁纸", total)
        for index, image in enumerate(images):
            try:
                results.append(self.save_wallpaper(image, index))
            except DownloadError as exc:
                self.logger.error("处理第 %d 张壁纸失败: %s", index, exc)
                last_error = DownloadError(f"处理第 %d 张壁纸失败: {exc}" % index)
                if not continue_on_error:
                    raise DownloadError(str(last_error), results) from exc
                results.extend(exc.results)
            if index < total - 1:
                self._pause()

        self.logger.info("所有壁纸处理完成！共处理 %d 张，成功 %d 张", total, len(results))
        if last_error is not None:
            raise DownloadError(f"有部分壁纸处理失败: {last_error}", results)
        return results

    def download_latest_wallpapers(
        self, days: int, continue_on_error: bool
    ) -> list[DownloadResult]:
        """Fetch metadata for ``days`` wallpapers in one request, then save them all."""
        if days <= 0 or days > MAX_DAYS:
            raise ValueError(f"days 必须在 1-16 之间，当前值: {days}")
        self.logger.info("正在批量获取最近 %d 天的壁纸", days)
        try:
            images = self.client.fetch_multiple_image_data(days)
        except BingClientError as exc:
            self.logger.error("获取壁纸数据失败: %s", exc)
            raise
        return self.save_wallpapers(images, continue_on_error)