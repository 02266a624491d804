import logging
from urllib.parse import urlparse

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


def storage_name_from_url(url):
    """
    把图片 URL 还原为存储中的文件名；不属于本站存储的 URL 返回 None。
    例：/media/credentials/2025/a.png -> credentials/2025/a.png
    """
    path = urlparse(url).path
    media_prefix = urlparse(settings.MEDIA_URL).path
    if not media_prefix or not path.startswith(media_prefix):
        return None
    name = path[len(media_prefix):].lstrip('/')
    return name or None


def delete_from_storage(url):
    name = storage_name_from_url(url)
    if name is None:
        logger.info("Asset %s is not managed by the local storage, skipped", url)
        return False
    if not default_storage.exists(name):
        return False
    default_storage.delete(name)
    logger.info("Asset %s deleted", name)
    return True


def delete_asset(url):
    """按 COSBAII_ASSET_DELETER 配置删除图片资源"""
    deleter = import_string(settings.COSBAII_ASSET_DELETER)
    return deleter(url)
