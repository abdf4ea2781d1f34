import hashlib
import logging
import os
from typing import Optional, Sequence

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.config.settings import settings
from src.orchestration.interfaces.image_cache import ImageCache

logger = logging.getLogger(__name__)


class RequestsImageCache(ImageCache):
    """
    Downloads notification images over HTTP and keeps them on disk.
    Files are named by the SHA-256 of their URI. Entries are never evicted.
    """

    REMOTE_SCHEMES = ("http://", "https://")

    def __init__(
            self,
            cache_dir: Optional[str] = None,
            timeout: Optional[int] = None,
            max_retries: Optional[int] = None
    ):
        self.cache_dir = cache_dir or settings.IMAGE_CACHE_DIR
        self.timeout = timeout if timeout is not None else settings.IMAGE_DOWNLOAD_TIMEOUT
        retries = max_retries if max_retries is not None else settings.IMAGE_DOWNLOAD_MAX_RETRIES
        self.session = self._create_session(retries)

    def _create_session(self, max_retries: int) -> requests.Session:
        session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=0.5,  # 0.5s, 1s, 2s...
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"]
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def cache_location(self) -> Optional[str]:
        return self.cache_dir

    def get_resolved(self, uri: str) -> Optional[str]:
        if not uri:
            return None
        path = self._path_for(uri)
        return path if os.path.isfile(path) else None

    def resolve(self, uris: Sequence[str]) -> int:
        downloaded = 0
        for uri in uris:
            if self._download(uri):
                downloaded += 1
        logger.debug(f"Resolved {downloaded} of {len(uris)} images")
        return downloaded

    def _path_for(self, uri: str) -> str:
        digest = hashlib.sha256(uri.encode("utf-8")).hexdigest()
        return os.path.join(self.cache_dir, digest)

    def _download(self, uri: str) -> bool:
        if not uri:
            return False
        if self.get_resolved(uri) is not None:
            return True
        if not uri.startswith(self.REMOTE_SCHEMES):
            # Bundled asset names are looked up by the renderer, not downloaded
            logger.debug(f"Not downloading non-HTTP image reference {uri!r}")
            return False

        try:
            response = self.session.get(uri, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Failed to download image {uri}: {e}")
            return False

        if not response.content:
            logger.warning(f"Image {uri} downloaded with an empty body")
            return False

        path = self._path_for(uri)
        tmp_path = f"{path}.part"
        try:
            os.makedirs(self.cache_dir, exist_ok=True)
            with open(tmp_path, "wb") as f:
                f.write(response.content)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.warning(f"Failed to store image {uri} in {self.cache_dir}: {e}")
            self._discard(tmp_path)
            return False
        return True

    def _discard(self, tmp_path: str):
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.debug(f"Could not remove partial download {tmp_path}: {e}")
