# drivers/session.py
"""
新增司机页面的工作状态（按会话保存）：
    draft       表单字段原值
    staging     附件暂存（pending / confirmed / 标签）
    photo       头像句柄
    submitting  提交中的防重入标志（带开始时间，超时视为已失效）
"""
import logging
import time

from django.conf import settings

from .blobs import BlobStash
from .forms import get_form_features
from .staging import AttachmentStagingStore, FileHandle

logger = logging.getLogger(__name__)


class DriverFormSession:
    SESSION_KEY = "drivers.add_driver"

    def __init__(self, request, notifier=None, stash=None, features=None):
        self.request = request
        self.stash = stash or BlobStash()
        self.features = features or get_form_features()

        data = request.session.get(self.SESSION_KEY) or {}
        self.draft = data.get("draft", {})
        self.photo = FileHandle.from_dict(data.get("photo"))
        self.submitting = bool(data.get("submitting", False))
        self.submitting_since = data.get("submitting_since")
        if self.submitting and self._submit_lock_expired():
            # 上次提交的进程被杀掉，标志没人清
            logger.warning("stale submitting flag dropped (since %s)", self.submitting_since)
            self.submitting = False
            self.submitting_since = None
        self.store = AttachmentStagingStore.from_dict(
            data.get("staging"),
            notifier=notifier,
            release=self.stash.release,
            max_confirmed=None if self.features.get("MULTI_ATTACHMENT") else 1,
        )

    def _submit_lock_expired(self):
        if self.submitting_since is None:
            return False
        return time.time() - self.submitting_since > settings.DQF_SUBMIT_LOCK_SECONDS

    def begin_submit(self):
        self.submitting = True
        self.submitting_since = time.time()
        self.save(flush=True)

    def end_submit(self):
        self.submitting = False
        self.submitting_since = None
        self.save(flush=True)

    def set_photo(self, handle):
        if self.photo is not None and self.photo != handle:
            self.stash.release(self.photo)
        self.photo = handle

    def remove_photo(self):
        self.set_photo(None)

    def to_dict(self):
        return {
            "draft": self.draft,
            "staging": self.store.to_dict(),
            "photo": self.photo.to_dict() if self.photo else None,
            "submitting": self.submitting,
            "submitting_since": self.submitting_since,
        }

    def save(self, flush=False):
        self.request.session[self.SESSION_KEY] = self.to_dict()
        if flush:
            # 立即落盘：并发的第二次提交能看到 submitting 标志
            self.request.session.save()

    def clear(self):
        """成功提交 / 取消：整条记录一起清空"""
        self.store.reset()
        self.remove_photo()
        self.draft = {}
        self.submitting = False
        self.submitting_since = None
        logger.debug("driver form state cleared")
