"""HTTP client for the Bing image archive API."""

from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.request
from typing import Any

from .logger import Logger, NullLogger
from .models import ArchiveResponse, ImageData

DEFAULT_BASE_URL = "https://www.bing.com/HPImageArchive.aspx"
DEFAULT_IMAGE_HOST = "https://www.bing.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_LOCALE = "zh-CN"
DEFAULT_TIMEOUT = 10.0
MAX_DAYS = 16


class BingClientError(Exception):
    """Raised when a request to Bing fails or its response cannot be used."""


class Client:
    """Fetches wallpaper metadata and image bytes from Bing."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        locale: str = DEFAULT_LOCALE,
        high_quality: bool = True,
        logger: Logger | NullLogger | None = None,
        image_host: str = DEFAULT_IMAGE_HOST,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self.locale = locale
        self.high_quality = high_quality
        self.logger = logger if logger is not None else Logger()
        self.image_host = image_host

    def _send_request(self, url: str, method: str = "GET") -> bytes:
        self.logger.debug("发送 %s 请求到 %s", method, url)
        try:
            request = urllib.request.Request(
                url, method=method, headers={"User-Agent": self.user_agent}
            )
        except ValueError as exc:
            self.logger.error("创建请求失败: %s", exc)
            raise BingClientError(f"创建请求失败: {exc}") from exc

        try:
            response = urllib.request.urlopen(request, timeout=self.timeout)
        except urllib.error.HTTPError as exc:
            exc.close()
            self.logger.error("HTTP错误状态码: %d", exc.code)
            raise BingClientError(f"HTTP错误状态码: {exc.code}") from exc
        except (urllib.error.URLError, OSError, http.client.HTTPException) as exc:
            self.logger.error("请求失败: %s", exc)
            raise BingClientError(f"请求失败: {exc}") from exc

        with response:
            if response.status != 200:
                self.logger.error("HTTP错误状态码: %d", response.status)
                raise BingClientError(f"HTTP错误状态码: {response.status}")
            try:
                body = response.read()
            except (OSError, http.client.HTTPException) as exc:
                self.logger.error("读取响应失败: %s", exc)
                raise BingClientError(f"读取响应失败: {exc}") from exc

        self.logger.debug("成功收到响应 (%d 字节)", len(body))
        return body

    def image_url(self, image: ImageData) -> str:
        """Full URL of the image; the UHD variant when high quality is enabled."""
        url = f"{self.image_host}{image.url}"
        if self.high_quality:
            url = url.replace("1920x1080", "UHD", 1)
        return url

    def api_url(self, days_ago: int, count: int) -> str:
        """Archive API URL for ``count`` images starting ``days_ago`` days back."""
        return f"{self.base_url}?format=js&n={count}&idx={days_ago}&mkt={self.locale}"

    def parse_image_response(self, data: bytes | str) -> list[ImageData]:
        """Decode an archive response; raise BingClientError if it is invalid or empty."""
        self.logger.debug("正在解析 API 响应数据...")
        try:
            decoded: Any = json.loads(data)
            response = ArchiveResponse() if decoded is None else ArchiveResponse.from_dict(decoded)
        except (ValueError, TypeError) as exc:
            self.logger.error("JSON解析失败: %s", exc)
            raise BingClientError(f"JSON解析失败: {exc}") from exc

        if not response.images:
            self.logger.error("未找到图片数据")
            raise BingClientError("未找到图片数据")

        self.logger.debug("成功解析 %d 条图片数据", len(response.images))
        return response.images

    def fetch_image_data(self, days_ago: int) -> ImageData:
        """Metadata of the wallpaper from ``days_ago`` days back."""
        images = self._fetch_images(days_ago, 1)
        if not images:
            self.logger.error("未找到图片数据")
            raise BingClientError("未找到图片数据")
        self.logger.info("成功获取壁纸数据")
        self.logger.debug("壁纸标题: %s", images[0].title)
        return images[0]

    def fetch_raw_image_data(self, image: ImageData) -> bytes:
        url = self.image_url(image)
        self.logger.info("获取图片数据: %s", url)
        return self._send_request(url)

    def fetch_raw_json_data(self, api_url: str) -> bytes:
        self.logger.info("获取 JSON 数据: %s", api_url)
        return self._send_request(api_url)

    def fetch_multiple_image_data(self, days: int) -> list[ImageData]:
        """Metadata of the most recent ``days`` wallpapers (1 to 16)."""
        if days <= 0 or days > MAX_DAYS:
            raise ValueError(f"days 必须在 1-16 之间，当前值: {days}")
        return self._fetch_images(0, days)

    def _fetch_images(self, days_ago: int, count: int) -> list[ImageData]:
        url = self.api_url(days_ago, count)
        self.logger.info(
            "正在获取壁纸数据: daysAgo=%d, count=%d, URL=%s", days_ago, count, url
        )
        body = self.fetch_raw_json_data(url)
        images = self.parse_image_response(body)
        self.logger.info("成功获取 %d 天的壁纸数据", len(images))
        return images