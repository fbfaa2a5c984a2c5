"""
Getting the GTFS feed onto disk.

The input can be an already extracted directory, a local .zip file or an
http(s) URL. Downloads remember the server's ETag / Last-Modified values in
the output directory so an unchanged feed is not fetched and processed again.
"""
import json
import os
import tempfile
import zipfile
from typing import Dict, Optional

import requests

from rdn_transit.logger import get_logger

logger = get_logger("download")

FEED_VERSION_FILENAME = '.rdn_feed_version.json'


def _feed_version_path(output_dir: str) -> str:
    return os.path.join(output_dir, FEED_VERSION_FILENAME)


def load_feed_version(output_dir: str) -> Optional[Dict[str, Optional[str]]]:
    """ETag and Last-Modified of the last downloaded feed, if any were stored."""
    path = _feed_version_path(output_dir)
    if not os.path.exists(path):
        return None
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable feed version file {path}: {e}")
        return None


def save_feed_version(output_dir: str, etag: Optional[str], last_modified: Optional[str]) -> None:
    os.makedirs(output_dir, exist_ok=True)
    path = _feed_version_path(output_dir)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump({'etag': etag, 'last_modified': last_modified}, f, indent=2)
    except OSError as e:
        logger.warning(f"Could not save feed version to {path}: {e}")


def _conditional_headers(version: Optional[Dict[str, Optional[str]]]) -> Dict[str, str]:
    headers: Dict[str, str] = {}
    if not version:
        return headers
    if version.get('etag'):
        headers['If-None-Match'] = version['etag']
    if version.get('last_modified'):
        headers['If-Modified-Since'] = version['last_modified']
    return headers


def is_feed_modified(feed_url: str, output_dir: str) -> bool:
    """
    Ask the server whether the feed changed since the stored version.

    Any answer other than 304 Not Modified, including a failed request,
    counts as modified.
    """
    headers = _conditional_headers(load_feed_version(output_dir))
    if not headers:
        return True

    try:
        response = requests.head(feed_url, headers=headers)
    except requests.RequestException as e:
        logger.warning(f"Could not check {feed_url} for changes ({e}), downloading anyway")
        return True

    if response.status_code == 304:
        logger.info("Feed not modified since last download (304)")
        return False
    if response.status_code != 200:
        logger.warning(f"Unexpected status {response.status_code} checking {feed_url} for changes, downloading anyway")
    return True


def extract_feed_zip(zip_filename: str) -> str:
    """Extract a GTFS zip into a new temporary directory and return its path."""
    temp_dir = tempfile.mkdtemp(prefix='gtfs_rdn_')
    with zipfile.ZipFile(zip_filename, 'r') as zip_ref:
        zip_ref.extractall(temp_dir)
    logger.info(f"Extracted {zip_filename} to {temp_dir}")
    return temp_dir


def download_feed_from_url(feed_url: str, output_dir: Optional[str] = None,
                           force_download: bool = False) -> Optional[str]:
    """
    Download and extract the GTFS feed.

    Args:
        feed_url: URL of the GTFS zip
        output_dir: Directory holding the stored feed version; no conditional
            check is made without it
        force_download: Download even when the feed is not modified

    Returns:
        Path to the extracted feed, or None if the download was skipped
    """
    if not force_download and output_dir and not is_feed_modified(feed_url, output_dir):
        return None

    response = requests.get(feed_url)
    if response.status_code != 200:
        raise requests.HTTPError(f"Failed to download GTFS feed from {feed_url}: {response.status_code}")

    fd, zip_filename = tempfile.mkstemp(prefix='gtfs_rdn_', suffix='.zip')
    try:
        with os.fdopen(fd, 'wb') as file:
            file.write(response.content)
        feed_dir = extract_feed_zip(zip_filename)
    finally:
        os.remove(zip_filename)

    # Only remember the feed version once it extracted cleanly
    if output_dir:
        etag = response.headers.get('ETag')
        last_modified = response.headers.get('Last-Modified')
        if etag or last_modified:
            save_feed_version(output_dir, etag, last_modified)

    logger.info(f"GTFS feed downloaded from {feed_url}")
    return feed_dir


def prepare_feed_directory(feed_source: str, output_dir: str, force_download: bool = False) -> Optional[str]:
    """
    Turn the input argument into a directory of GTFS .txt files.

    Returns:
        Path to the feed directory, or None if the download was skipped
    """
    if feed_source.startswith(('http://', 'https://')):
        logger.info(f"Downloading GTFS feed from {feed_source}...")
        return download_feed_from_url(feed_source, output_dir, force_download)
    if os.path.isdir(feed_source):
        return feed_source
    if zipfile.is_zipfile(feed_source):
        return extract_feed_zip(feed_source)
    raise FileNotFoundError(f"GTFS feed not found or not a zip file: {feed_source}")
