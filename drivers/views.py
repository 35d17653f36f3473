import logging

from asgiref.sync import async_to_sync
from django.conf import settings
from django.shortcuts import render, redirect
from django.views.decorators.http import require_http_methods

from .constants import (
    ACTION_SELECT_FILE, ACTION_REMOVE_PENDING, ACTION_CONFIRM_ATTACHMENT,
    ACTION_REMOVE_ATTACHMENT, ACTION_SELECT_PHOTO, ACTION_REMOVE_PHOTO,
    ACTION_CANCEL, ACTION_SUBMIT,
)
from .forms import DriverRecordForm, draft_from_post
from .intake import FileIntakeWidget
from .notifications import RequestNotifier
from .records import DriverRecord
from .services import SubmissionError, get_record_submitter
from .session import DriverFormSession

logger = logging.getLogger(__name__)


# ✅ 仪表盘
@require_http_methods(["GET"])
def dashboard(request):
    return render(request, 'drivers/dashboard.html')


# ----- 上传控件（每次请求按当前状态重新构建） -----
def build_dqf_widget(state, notifier=None):
    return FileIntakeWidget(
        on_file_select=lambda f: state.store.select_pending(state.stash.stash(f)),
        on_file_remove=state.store.remove_pending,
        notifier=notifier,
        accepted_file_types=settings.DQF_ACCEPTED_FILE_TYPES,
        max_size_mb=settings.DQF_UPLOAD_MAX_SIZE_MB,
        selected_file=state.store.pending,
        name='dqf_file',
        remove_action=ACTION_REMOVE_PENDING,
    )


def build_photo_widget(state, notifier=None):
    return FileIntakeWidget(
        on_file_select=lambda f: state.set_photo(state.stash.stash(f)),
        on_file_remove=state.remove_photo,
        notifier=notifier,
        accepted_file_types=settings.DQF_PHOTO_FILE_TYPES,
        max_size_mb=settings.DQF_PHOTO_MAX_SIZE_MB,
        selected_file=state.photo,
        name='profile_photo',
        remove_action=ACTION_REMOVE_PHOTO,
        prompt="Drop a profile photo here",
        supports="JPG, PNG, GIF",
    )


def _render_driver_add(request, state, form):
    return render(request, 'drivers/driver_add.html', {
        'form': form,
        'file_label': state.store.label,
        'attachments': state.store.confirmed,
        'has_pending': state.store.has_pending,
        'dqf_widget': build_dqf_widget(state).render(),
        'photo_widget': build_photo_widget(state).render(),
        'is_submitting': state.submitting,
        'multi_attachment': state.features.get("MULTI_ATTACHMENT"),
    })


def _remove_attachment(state, notifier, raw_index):
    # 按位置删除：页面上的序号可能已过期（别的标签页删过），越界就提示
    try:
        state.store.remove_confirmed(int(raw_index))
    except (TypeError, ValueError, IndexError):
        logger.info("stale attachment index: %r", raw_index)
        notifier.warning("Attachment not found", "The attachment list has changed. Please try again.")


def _submit(request, state, notifier):
    if state.submitting:
        notifier.warning("Submission in progress", "This driver is already being added. Please wait.")
        state.save()
        return redirect('drivers:driver_add')

    form = DriverRecordForm(request.POST, features=state.features)
    if not form.is_valid():
        state.save()
        return _render_driver_add(request, state, form)

    record = DriverRecord.from_cleaned_data(
        form.cleaned_data,
        attachments=state.store.confirmed,
        profile_photo=state.photo,
    )
    submitter = get_record_submitter()

    state.begin_submit()
    try:
        result = async_to_sync(submitter.submit)(record)
        if not result.ok:
            raise SubmissionError(result.message or "submitter reported failure")
    except SubmissionError as e:
        # 附件保持原样，用户可直接重试
        logger.warning("driver submit failed for %s: %s", record.full_name, e)
        notifier.error("Error", "Failed to add driver. Please try again.")
    except Exception:
        # 网络异常等也按提交失败处理
        logger.exception("driver submit crashed for %s", record.full_name)
        notifier.error("Error", "Failed to add driver. Please try again.")
    else:
        logger.info("driver added: %s", record.full_name)
        notifier.success("Driver Added Successfully", f"{record.full_name} has been added to the system.")
        state.clear()
    finally:
        state.end_submit()
    return redirect('drivers:driver_add')


# ✅ 新增司机（所有交互都 POST 回本页）
@require_http_methods(["GET", "POST"])
def driver_add(request):
    notifier = RequestNotifier(request)
    state = DriverFormSession(request, notifier=notifier)

    if request.method == 'POST':
        action = request.POST.get('action', '')
        if not action and 'index' in request.POST:
            # 列表里的删除按钮只提交 index
            action = ACTION_REMOVE_ATTACHMENT
        # 先保存已输入的内容，任何动作都不丢
        state.draft = draft_from_post(request.POST, state.features)
        if 'file_label' in request.POST:
            state.store.set_label(request.POST.get('file_label'))

        if action == ACTION_SUBMIT:
            return _submit(request, state, notifier)

        if action == ACTION_SELECT_FILE:
            build_dqf_widget(state, notifier).browse(request.FILES.getlist('dqf_file'))
        elif action == ACTION_REMOVE_PENDING:
            build_dqf_widget(state, notifier).remove()
        elif action == ACTION_CONFIRM_ATTACHMENT:
            attachment = state.store.confirm()
            if attachment is not None:
                notifier.success("File attached", f"{attachment.label} was added to the qualification file")
        elif action == ACTION_REMOVE_ATTACHMENT:
            _remove_attachment(state, notifier, request.POST.get('index'))
        elif action == ACTION_SELECT_PHOTO:
            build_photo_widget(state, notifier).browse(request.FILES.getlist('profile_photo'))
        elif action == ACTION_REMOVE_PHOTO:
            build_photo_widget(state, notifier).remove()
        elif action == ACTION_CANCEL:
            state.clear()
        else:
            logger.info("unknown driver form action: %r", action)

        state.save()
        return redirect('drivers:driver_add')

    form = DriverRecordForm(initial=state.draft, features=state.features)
    return _render_driver_add(request, state, form)
