# drivers/services.py
"""
司机记录提交。

真正的系统会在这里调用 API / 逐个上传附件；目前只有模拟实现：
固定延迟后返回成功。视图只依赖 RecordSubmitter 接口。
"""
import asyncio
import logging
from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """提交失败（网络/服务端），由页面捕获后提示用户重试"""


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    message: str = ""


class RecordSubmitter:
    async def submit(self, record) -> SubmissionResult:
        raise NotImplementedError


class SimulatedRecordSubmitter(RecordSubmitter):
    def __init__(self, delay=None):
        self.delay = settings.DQF_SUBMIT_DELAY_SECONDS if delay is None else delay

    async def submit(self, record) -> SubmissionResult:
        await asyncio.sleep(self.delay)
        logger.info(
            "simulated submit: %s (%d attachment(s), photo=%s)",
            record.full_name, len(record.attachments), bool(record.profile_photo),
        )
        return SubmissionResult(ok=True)


def get_record_submitter() -> RecordSubmitter:
    path = settings.DQF_RECORD_SUBMITTER
    try:
        submitter_class = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(f"DQF_RECORD_SUBMITTER={path!r} cannot be imported: {e}") from e
    return submitter_class()
