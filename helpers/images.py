"""
Image helpers for the transformation pages.

Covers display sizing, the shimmer placeholder shown while a
transformation is pending, and preparing a transformed image for
``dcc.Download``.
"""

import base64
import logging
from pathlib import PurePosixPath
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

import requests
from dash import dcc

from core.config import DownloadConfig, ImageConfig
from core.exceptions import DownloadError, ValidationError

logger = logging.getLogger(__name__)

DIMENSIONS = ('width', 'height')
FILL_TRANSFORMATION = 'fill'


def get_image_size(transformation_type: str,
                   image: Optional[Mapping[str, Any]],
                   dimension: str,
                   image_config: Optional[ImageConfig] = None) -> int:
    """
    Resolve the display width or height of an image.

    For the ``fill`` transformation the size comes from the image's aspect
    ratio preset, since generative fill changes the canvas. Every other
    transformation keeps the image's own dimension. Anything missing or zero
    falls back to the configured default.

    Args:
        transformation_type: Transformation applied to the image
        image: Image record with ``aspect_ratio``, ``width`` and ``height``
        dimension: 'width' or 'height'
        image_config: Image settings; the global config when omitted

    Returns:
        The dimension in pixels
    """
    if dimension not in DIMENSIONS:
        raise ValidationError(f"dimension must be one of {DIMENSIONS}", field='dimension', value=dimension)

    config = image_config or _image_config()
    image = image or {}

    if transformation_type == FILL_TRANSFORMATION:
        aspect_ratio = image.get('aspect_ratio') or config.default_aspect_ratio
        preset = config.aspect_ratios.get(aspect_ratio, {})
        return preset.get(dimension) or config.default_dimension

    return image.get(dimension) or config.default_dimension


def shimmer_svg(width: int, height: int) -> str:
    """Animated gradient SVG used as a placeholder while an image transforms."""
    return f"""
<svg width="{width}" height="{height}" version="1.1" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
  <defs>
    <linearGradient id="g">
      <stop stop-color="#7986AC" offset="20%" />
      <stop stop-color="#68769e" offset="50%" />
      <stop stop-color="#7986AC" offset="70%" />
    </linearGradient>
  </defs>
  <rect width="{width}" height="{height}" fill="#7986AC" />
  <rect id="r" width="{width}" height="{height}" fill="url(#g)" />
  <animate xlink:href="#r" attributeName="x" from="-{width}" to="{width}" dur="1s" repeatCount="indefinite"  />
</svg>"""


def placeholder_data_url(width: int = 1000, height: int = 1000) -> str:
    """Return the shimmer placeholder as a base64 data URL for html.Img."""
    encoded = base64.b64encode(shimmer_svg(width, height).encode('utf-8')).decode('ascii')
    return f"data:image/svg+xml;base64,{encoded}"


DATA_URL = placeholder_data_url(1000, 1000)


def download_filename(filename: Optional[str], url: str, extension: str = 'png') -> str:
    """
    Name the downloaded file.

    A given title has its first space replaced by an underscore and the
    extension appended; otherwise the last segment of the URL path is used.
    """
    if filename:
        return f"{filename.replace(' ', '_', 1)}.{extension}"

    name = PurePosixPath(urlsplit(url).path).name
    return name or f"download.{extension}"


def download(url: str,
             filename: Optional[str] = None,
             download_config: Optional[DownloadConfig] = None) -> Dict[str, Any]:
    """
    Fetch an image and package it for a ``dcc.Download`` component.

    Args:
        url: Address of the (transformed) image
        filename: Title to save the file under, without extension
        download_config: Download settings; the global config when omitted

    Returns:
        Payload produced by ``dcc.send_bytes``

    Raises:
        ValidationError: If no URL is given
        DownloadError: If the image cannot be fetched
    """
    if not url:
        raise ValidationError("Resource URL not provided! You need to provide one", field='url')

    config = download_config or _download_config()

    try:
        response = requests.get(url, timeout=config.timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as e:
        status_code = e.response.status_code if e.response is not None else None
        logger.error(f"Failed to download image from {url}: {e}")
        raise DownloadError(f"Failed to download image: {e}", url=url, status_code=status_code) from e

    name = download_filename(filename, url, config.file_extension)
    logger.info(f"Prepared download {name} ({len(response.content)} bytes)")
    return dcc.send_bytes(response.content, name)


def _image_config() -> ImageConfig:
    from config_manager import get_config
    return get_config().images


def _download_config() -> DownloadConfig:
    from config_manager import get_config
    return get_config().download
