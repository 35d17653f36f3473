# drivers/intake.py
"""
文件拖放/选择控件（File Intake Widget）。

校验单个文件的大小，通过后交给调用方的 on_file_select；
控件本身只报告新选中的文件，记录归属方（表单）持有状态。

受控 / 非受控：
  - 调用方传了 selected_file（非 None）→ Controlled，显示外部值
  - 否则 → Uncontrolled，显示控件内部记下的文件
  - 同步规则：外部值为空（包括从“有”变为“无”）时，内部值一并清空（sync_external）
"""
import enum
import logging
from dataclasses import dataclass

from django.core.exceptions import ValidationError
from django.template.loader import render_to_string

from .constants import BYTES_PER_MB
from .validators import MaxFileSizeValidator

logger = logging.getLogger(__name__)

DEFAULT_ACCEPTED_FILE_TYPES = ".dqf,.pdf,.doc,.docx"
DEFAULT_MAX_SIZE_MB = 10


class WidgetMode(enum.Enum):
    UNCONTROLLED = "uncontrolled"
    CONTROLLED = "controlled"


@dataclass(frozen=True)
class IntakeState:
    mode: WidgetMode
    file: object = None

    @property
    def is_empty(self):
        return self.file is None


class FileIntakeWidget:
    template_name = "drivers/widgets/file_intake.html"

    def __init__(self, on_file_select, *, notifier=None,
                 accepted_file_types=DEFAULT_ACCEPTED_FILE_TYPES,
                 max_size_mb=DEFAULT_MAX_SIZE_MB,
                 selected_file=None, on_file_remove=None,
                 name="file", remove_action="", prompt="Drop your DQF file here",
                 supports="DQF, PDF, DOC, DOCX"):
        self.on_file_select = on_file_select
        self.on_file_remove = on_file_remove
        self.notifier = notifier
        self.accepted_file_types = accepted_file_types
        self.max_size_mb = max_size_mb
        self.validator = MaxFileSizeValidator(max_size_mb)
        self.name = name
        self.remove_action = remove_action
        self.prompt = prompt
        self.supports = supports

        self.is_drag_active = False
        self._internal_file = None
        self._external_file = None
        self.sync_external(selected_file)

    # ---------- 状态 ----------
    def sync_external(self, selected_file):
        """父组件每次渲染时传入的外部值；外部值消失时清空内部值"""
        if selected_file is None:
            self._internal_file = None
        self._external_file = selected_file

    def resolve(self) -> IntakeState:
        if self._external_file is not None:
            return IntakeState(WidgetMode.CONTROLLED, self._external_file)
        return IntakeState(WidgetMode.UNCONTROLLED, self._internal_file)

    @property
    def selected_file(self):
        return self.resolve().file

    # ---------- 拖放（只影响外观） ----------
    def drag_enter(self):
        self.is_drag_active = True

    def drag_over(self):
        self.is_drag_active = True

    def drag_leave(self):
        self.is_drag_active = False

    # ---------- 输入 ----------
    def drop(self, files):
        self.is_drag_active = False
        return self.browse(files)

    def browse(self, files):
        """只取第一个文件；没有文件时什么都不做"""
        files = list(files or [])
        if not files:
            return None
        return self.handle_file(files[0])

    def handle_file(self, file):
        try:
            self.validator(file)
        except ValidationError as e:
            logger.info("file rejected: %s (%s bytes > %s MB)", file.name, file.size, self.max_size_mb)
            if self.notifier is not None:
                self.notifier.warning("File too large", e.messages[0])
            return None

        self._internal_file = file
        result = self.on_file_select(file)
        if self.notifier is not None:
            self.notifier.success("File selected", f"{file.name} is ready to upload")
        return result

    def remove(self):
        self._internal_file = None
        if self.on_file_remove is not None:
            self.on_file_remove()

    # ---------- 渲染 ----------
    def get_context(self):
        state = self.resolve()
        return {
            "name": self.name,
            "accept": self.accepted_file_types,
            "max_size_mb": f"{self.max_size_mb:g}",
            "prompt": self.prompt,
            "supports": self.supports,
            "mode": state.mode.value,
            "is_empty": state.is_empty,
            "file": state.file,
            "size_mb": f"{state.file.size / BYTES_PER_MB:.2f}" if state.file else "",
            "is_drag_active": self.is_drag_active,
            "remove_action": self.remove_action,
        }

    def render(self):
        return render_to_string(self.template_name, self.get_context())
