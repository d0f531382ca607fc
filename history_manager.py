import itertools
import json
import logging
import os
import tempfile
import threading
import time

from config import MAX_ITEMS
from exceptions import HistoryWriteError

logger = logging.getLogger(__name__)


class ClipboardItem:
    """一条剪贴板历史记录"""

    __slots__ = ("content", "timestamp", "id")

    def __init__(self, content, timestamp, id):
        self.content = content
        self.timestamp = timestamp
        self.id = id

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError(f"记录不是对象: {data!r}")
        content = data.get("content")
        timestamp = data.get("timestamp")
        item_id = data.get("id")
        if not isinstance(content, str) or not content:
            raise ValueError("记录缺少 content")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError("记录缺少 timestamp")
        if not isinstance(item_id, str):
            raise ValueError("记录缺少 id")
        return cls(content, timestamp, item_id)

    def to_dict(self):
        return {"content": self.content, "timestamp": self.timestamp, "id": self.id}

    def __eq__(self, other):
        if not isinstance(other, ClipboardItem):
            return NotImplemented
        return (self.content, self.timestamp, self.id) == (other.content, other.timestamp, other.id)

    def __repr__(self):
        return f"ClipboardItem(id={self.id!r}, timestamp={self.timestamp!r}, content={self.content[:20]!r})"


class HistoryManager:
    """读写穿透的历史存储：每次操作都从文件加载，修改后整体写回"""

    def __init__(self, history_file, max_items=MAX_ITEMS):
        self.history_file = os.fspath(history_file)
        self.max_items = max_items
        self.history_lock = threading.Lock()
        self._seq = itertools.count()

    def load(self):
        """加载历史记录，文件缺失或损坏时返回空列表"""
        try:
            with open(self.history_file, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            logger.error("读取历史文件失败: %s", e)
            return []

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.warning("历史文件格式错误，按空历史处理: %s", e)
            return []

        if not isinstance(data, list):
            logger.warning("历史文件不是列表，按空历史处理")
            return []

        items = []
        for record in data:
            try:
                items.append(ClipboardItem.from_dict(record))
            except ValueError as e:
                logger.warning("跳过无效记录: %s", e)
        return items

    def save(self, items):
        """原子写入：先写临时文件，再替换原文件"""
        data = [item.to_dict() for item in items]
        directory = os.path.dirname(os.path.abspath(self.history_file))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".history-", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.history_file)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path and os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.debug("临时文件删除失败: %s", tmp_path)
            raise HistoryWriteError("保存历史记录失败", original_error=e)

    def add_item(self, content):
        """添加新项：去重、置顶、截断并保存"""
        if not content:
            return False

        with self.history_lock:
            items = self.load()
            items = [item for item in items if item.content != content]
            new_item = ClipboardItem(
                content=content,
                timestamp=int(time.time()),
                id=f"{time.time_ns()}-{next(self._seq)}",
            )
            items.insert(0, new_item)
            del items[self.max_items:]

            try:
                self.save(items)
            except HistoryWriteError as e:
                logger.error("%s", e)
                return False

        logger.debug("已记录剪贴板内容 (%d 字符)，共 %d 条", len(content), len(items))
        return True

    def clear(self):
        """清空历史记录"""
        with self.history_lock:
            try:
                self.save([])
            except HistoryWriteError as e:
                logger.error("%s", e)
                return False
        logger.info("历史记录已清空")
        return True
