# drivers/blobs.py
"""
暂存上传文件的字节。

表单的每次交互都是一次新请求，pending / confirmed 的文件内容放在
settings.DQF_STAGING_CACHE 指定的缓存里，会话里只保存 FileHandle。
"""
import logging
import uuid

from django.conf import settings
from django.core.cache import caches

from .staging import FileHandle

logger = logging.getLogger(__name__)

KEY_PREFIX = "dqf-blob:"


class BlobStash:
    def __init__(self, alias=None, timeout=None):
        self.alias = alias or settings.DQF_STAGING_CACHE
        self.timeout = timeout if timeout is not None else settings.DQF_STAGING_TTL_SECONDS

    @property
    def cache(self):
        return caches[self.alias]

    def stash(self, uploaded_file) -> FileHandle:
        key = f"{KEY_PREFIX}{uuid.uuid4().hex}"
        uploaded_file.seek(0)
        content = b"".join(uploaded_file.chunks())
        self.cache.set(key, content, self.timeout)
        handle = FileHandle(
            name=uploaded_file.name,
            size=uploaded_file.size,
            content_type=getattr(uploaded_file, "content_type", None) or "",
            key=key,
        )
        logger.debug("stashed %s as %s", handle.name, key)
        return handle

    def read(self, handle):
        if not handle or not handle.key:
            return None
        return self.cache.get(handle.key)

    def release(self, handle):
        if handle and handle.key:
            self.cache.delete(handle.key)
            logger.debug("released %s", handle.key)
