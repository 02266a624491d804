"""
提交后副作用（通知、徽章、图片清理）的执行入口。

每个副作用都是独立、可重复执行的函数：主操作的事务提交后才执行，
失败只写日志，不影响主操作的结果。后续如需改为队列执行，只需替换 run_best_effort。
"""
import logging
from functools import partial

from django.db import transaction

logger = logging.getLogger(__name__)


def run_best_effort(name, func, *args, **kwargs):
    try:
        return func(*args, **kwargs)
    except Exception:
        logger.exception("Side effect '%s' failed", name)
        return None


def after_commit(name, func, *args, **kwargs):
    """在当前事务提交后执行副作用；不在事务中时立即执行"""
    transaction.on_commit(partial(run_best_effort, name, func, *args, **kwargs))
