from dataclasses import dataclass

from drivers.services import RecordSubmitter, SubmissionError, SubmissionResult


@dataclass(frozen=True)
class FakeFile:
    name: str
    size: int
    content_type: str = "application/pdf"


class RecordingNotifier:
    def __init__(self):
        self.toasts = []

    def success(self, title, description=""):
        self.toasts.append(("success", title, description))

    def warning(self, title, description=""):
        self.toasts.append(("warning", title, description))

    def error(self, title, description=""):
        self.toasts.append(("error", title, description))

    def levels(self):
        return [level for level, _, _ in self.toasts]


class RecordingSubmitter(RecordSubmitter):
    records = []

    async def submit(self, record):
        type(self).records.append(record)
        return SubmissionResult(ok=True)


class FailingSubmitter(RecordSubmitter):
    async def submit(self, record):
        raise SubmissionError("upstream unavailable")


class RejectingSubmitter(RecordSubmitter):
    async def submit(self, record):
        return SubmissionResult(ok=False, message="record rejected")


class CrashingSubmitter(RecordSubmitter):
    async def submit(self, record):
        raise ConnectionError("network down")
