from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible

from .constants import BYTES_PER_MB


def _format_mb(value):
    # 10.0 → "10"，2.5 → "2.5"
    return f"{value:g}"


@deconstructible
class MaxFileSizeValidator:
    """上传文件大小上限（单位 MB，1 MB = 1024*1024 字节）"""
    code = "file_too_large"

    def __init__(self, max_size_mb):
        self.max_size_mb = max_size_mb

    @property
    def limit_bytes(self):
        return int(self.max_size_mb * BYTES_PER_MB)

    @property
    def message(self):
        return f"File size must be less than {_format_mb(self.max_size_mb)}MB"

    def __call__(self, file):
        if file.size > self.limit_bytes:
            raise ValidationError(self.message, code=self.code, params={"max_size_mb": self.max_size_mb})

    def __eq__(self, other):
        return isinstance(other, MaxFileSizeValidator) and self.max_size_mb == other.max_size_mb
