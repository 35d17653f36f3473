# drivers/staging.py
"""
DQF 附件暂存：先选文件（pending），填写标签后确认（confirmed）。

- pending 同时最多一个
- confirmed 按插入顺序保存，删除时以位置为键
- reset() 一次性清空 pending / confirmed / 标签
"""
import logging
import re
from dataclasses import dataclass, asdict

from .constants import BYTES_PER_MB

logger = logging.getLogger(__name__)

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


@dataclass(frozen=True)
class FileHandle:
    """上传文件的不透明句柄：字节本身放在 blobs 暂存里，这里只记元数据"""
    name: str
    size: int
    content_type: str = ""
    key: str = ""

    @property
    def size_mb(self) -> str:
        return f"{self.size / BYTES_PER_MB:.2f}"

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        if not data:
            return None
        return cls(
            name=data["name"],
            size=int(data["size"]),
            content_type=data.get("content_type", ""),
            key=data.get("key", ""),
        )


@dataclass(frozen=True)
class ConfirmedAttachment:
    label: str
    file: FileHandle

    def to_dict(self):
        return {"label": self.label, "file": self.file.to_dict()}

    @classmethod
    def from_dict(cls, data):
        return cls(label=data["label"], file=FileHandle.from_dict(data["file"]))


def label_from_filename(name: str) -> str:
    """
    去掉最后一个扩展名作为默认标签：
        "report.v2.pdf" → "report.v2"
        "driver_license.pdf" → "driver_license"
    去掉后为空（如 ".env"）时保留原文件名。
    """
    stripped = _EXTENSION_RE.sub("", name or "")
    return stripped or (name or "")


class AttachmentStagingStore:
    """
    一条司机记录的附件暂存区。

    notifier 需要提供 warning(title, description)；
    release 在句柄被丢弃时调用（用来释放暂存的字节）。
    max_confirmed=1 时为单文件模式：确认新文件会替换旧文件。
    """

    MISSING_INFO_TITLE = "Missing information"
    MISSING_INFO_DESCRIPTION = "Please provide both a file label and select a file."

    def __init__(self, notifier=None, release=None, max_confirmed=None,
                 pending=None, confirmed=None, label=""):
        self.notifier = notifier
        self.release = release
        self.max_confirmed = max_confirmed
        self.pending = pending
        self.confirmed = list(confirmed or [])
        self.label = label or ""

    # ---------- 状态派生 ----------
    @property
    def count(self) -> int:
        return len(self.confirmed)

    @property
    def has_pending(self) -> bool:
        return self.pending is not None

    def set_label(self, value):
        self.label = value or ""

    # ---------- 操作 ----------
    def select_pending(self, file):
        previous = self.pending
        self.pending = file
        if previous is not None and previous != file:
            self._release(previous)

        # ✅ 标签为空时，用文件名（去扩展名）自动填充
        if not self.label.strip():
            self.label = label_from_filename(file.name)
        logger.debug("pending file selected: %s (%s bytes)", file.name, file.size)

    def confirm(self):
        label = self.label.strip()
        if self.pending is None or not label:
            logger.info("attachment confirm rejected: pending=%s label=%r", self.has_pending, self.label)
            if self.notifier is not None:
                self.notifier.warning(self.MISSING_INFO_TITLE, self.MISSING_INFO_DESCRIPTION)
            return None

        attachment = ConfirmedAttachment(label=label, file=self.pending)
        if self.max_confirmed is not None and len(self.confirmed) >= self.max_confirmed:
            # 单文件模式：挤掉最早的
            dropped = self.confirmed[:len(self.confirmed) - self.max_confirmed + 1]
            self.confirmed = self.confirmed[len(dropped):]
            for item in dropped:
                self._release(item.file)

        self.confirmed.append(attachment)
        self.pending = None
        self.label = ""
        logger.debug("attachment confirmed: %s -> #%d", attachment.label, len(self.confirmed) - 1)
        return attachment

    def remove_pending(self):
        if self.pending is None:
            return
        dropped, self.pending = self.pending, None
        self._release(dropped)

    def remove_confirmed(self, index: int):
        # 只接受 0 <= index < N，不用 Python 的负数下标
        if not 0 <= index < len(self.confirmed):
            raise IndexError(f"attachment index {index} out of range (0..{len(self.confirmed) - 1})")
        removed = self.confirmed.pop(index)
        self._release(removed.file)
        logger.debug("attachment removed: #%d %s", index, removed.label)
        return removed

    def reset(self):
        dropped = [a.file for a in self.confirmed]
        if self.pending is not None:
            dropped.append(self.pending)
        self.pending = None
        self.confirmed = []
        self.label = ""
        for handle in dropped:
            self._release(handle)

    def _release(self, handle):
        if self.release is not None:
            self.release(handle)

    # ---------- 序列化（会话） ----------
    def to_dict(self):
        return {
            "pending": self.pending.to_dict() if self.pending else None,
            "confirmed": [a.to_dict() for a in self.confirmed],
            "label": self.label,
        }

    @classmethod
    def from_dict(cls, data, **kwargs):
        data = data or {}
        return cls(
            pending=FileHandle.from_dict(data.get("pending")),
            confirmed=[ConfirmedAttachment.from_dict(d) for d in data.get("confirmed", [])],
            label=data.get("label", ""),
            **kwargs,
        )
