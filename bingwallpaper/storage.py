"""Saving wallpapers and their metadata to the file system."""

from __future__ import annotations

import os
import shutil
from typing import BinaryIO, Protocol

from .logger import Logger, NullLogger
from .models import ImageData
from .utils import extract_wallpaper_description


class StorageError(Exception):
    """Raised when data cannot be written."""


class FilenameGenerator(Protocol):
    def image_filename(self, image: ImageData, base_path: str) -> str: ...

    def json_filename(self, image: ImageData, base_path: str) -> str: ...


class FileStorage:
    """Writes bytes to files, creating parent directories as needed."""

    def __init__(
        self,
        logger: Logger | NullLogger | None = None,
        *,
        mkdir_mode: int = 0o755,
        file_mode: int = 0o644,
    ) -> None:
        self.logger = logger if logger is not None else NullLogger()
        self.mkdir_mode = mkdir_mode
        self.file_mode = file_mode

    def _ensure_parent(self, path: str) -> None:
        directory = os.path.dirname(path)
        if not directory:
            return
        try:
            os.makedirs(directory, mode=self.mkdir_mode, exist_ok=True)
        except OSError as exc:
            self.logger.error("创建目录失败: %s", exc)
            raise StorageError(f"创建目录失败: {exc}") from exc

    def _open(self, path: str) -> BinaryIO:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.file_mode)
        return os.fdopen(fd, "wb")

    def save(self, data: bytes, path: str | os.PathLike) -> None:
        """Write ``data`` to ``path``, replacing any existing file."""
        path = os.fspath(path)
        self.logger.debug("保存 %d 字节数据到文件: %s", len(data), path)
        self._ensure_parent(path)
        try:
            with self._open(path) as handle:
                handle.write(data)
        except OSError as exc:
            self.logger.error("写入文件失败: %s", exc)
            raise StorageError(f"写入文件失败: {exc}") from exc
        self.logger.info("成功保存数据到: %s", path)

    def save_stream(self, stream: BinaryIO, path: str | os.PathLike) -> None:
        """Copy everything readable from ``stream`` into ``path``."""
        path = os.fspath(path)
        self.logger.debug("从读取器保存数据到文件: %s", path)
        self._ensure_parent(path)
        try:
            handle = self._open(path)
        except OSError as exc:
            self.logger.error("创建文件失败: %s", exc)
            raise StorageError(f"创建文件失败: {exc}") from exc
        with handle:
            try:
                shutil.copyfileobj(stream, handle)
                written = handle.tell()
            except OSError as exc:
                self.logger.error("写入文件失败: %s", exc)
                raise StorageError(f"写入文件失败: {exc}") from exc
        self.logger.info("成功保存 %d 字节数据到: %s", written, path)

    def exists(self, path: str | os.PathLike) -> bool:
        return os.path.exists(path)


class DefaultFilenameGenerator:
    """Names images ``<date>_<description>.jpg`` and metadata ``bing_data_<date>.json``."""

    def __init__(self, logger: Logger | NullLogger | None = None) -> None:
        self.logger = logger if logger is not None else NullLogger()

    def image_filename(self, image: ImageData, base_path: str | os.PathLike) -> str:
        filename = f"{image.startdate}_{extract_wallpaper_description(image)}.jpg"
        self.logger.debug("生成图片文件名: %s", filename)
        return os.path.join(os.fspath(base_path), filename)

    def json_filename(self, image: ImageData, base_path: str | os.PathLike) -> str:
        filename = f"bing_data_{image.startdate}.json"
        self.logger.debug("生成 JSON 文件名: %s", filename)
        return os.path.join(os.fspath(base_path), filename)


class BingImageStorage:
    """Stores wallpapers and their JSON metadata under ``output_dir``."""

    def __init__(
        self,
        output_dir: str | os.PathLike,
        logger: Logger | NullLogger | None = None,
    ) -> None:
        self.logger = logger if logger is not None else NullLogger()
        self.output_dir = os.fspath(output_dir)
        self.storage = FileStorage(self.logger)
        self.generator: FilenameGenerator = DefaultFilenameGenerator(self.logger)

    def save_image(self, data: bytes, image: ImageData) -> str:
        """Save image bytes and return the path written."""
        self.logger.info("保存图片数据...")
        path = self.generator.image_filename(image, self.output_dir)
        self.storage.save(data, path)
        return path

    def save_image_from_stream(self, stream: BinaryIO, image: ImageData) -> str:
        """Save image bytes read from ``stream`` and return the path written."""
        self.logger.info("从读取器保存图片数据...")
        path = self.generator.image_filename(image, self.output_dir)
        self.storage.save_stream(stream, path)
        return path

    def save_json(self, data: bytes, image: ImageData) -> str:
        """Save raw JSON metadata and return the path written."""
        self.logger.info("保存 JSON 数据...")
        path = self.generator.json_filename(image, self.output_dir)
        self.storage.save(data, path)
        return path