"""菜单同步：把历史文件的内容渲染到托盘菜单的固定槽位上。

render_target 只需提供以下接口（gui.ClipboardTray 为 Qt 实现）：

    slot_count            槽位数量
    set_label(i, text)    设置标题
    show(i) / hide(i)     显示 / 隐藏
    enable(i) / disable(i)

快照只按 id 顺序比较，内容未变化时不触碰菜单，避免闪烁。
"""
import logging
import threading

from config import EMPTY_TITLE, LABEL_LENGTH, MAX_MENU_ITEMS

logger = logging.getLogger(__name__)

_WHITESPACE = str.maketrans({"\n": " ", "\r": " ", "\t": " "})


def format_label(text, max_length=LABEL_LENGTH):
    """截断过长文本并把换行、制表符替换为空格，保证单行显示"""
    if len(text) > max_length:
        text = text[:max_length - 3] + "..."
    return text.translate(_WHITESPACE)


class MenuSynchronizer:
    def __init__(self, history_manager, render_target, max_menu_items=MAX_MENU_ITEMS,
                 label_length=LABEL_LENGTH, empty_title=EMPTY_TITLE):
        self.history_manager = history_manager
        self.render_target = render_target
        self.max_menu_items = max_menu_items
        self.label_length = label_length
        self.empty_title = empty_title
        # 与 CommandDispatcher 共用，保护快照和菜单槽位
        self.lock = threading.Lock()
        # None 表示尚未渲染过，首次刷新总会重绘
        self._items = None

    def item_at(self, index):
        """按下标取快照中的条目，调用方需持有 lock"""
        if self._items and 0 <= index < len(self._items):
            return self._items[index]
        return None

    def _unchanged(self, items):
        if self._items is None:
            return False
        if len(items) != len(self._items):
            return False
        return all(new.id == old.id for new, old in zip(items, self._items))

    def refresh(self, force=False):
        """重新加载历史，有变化（或 force）时重绘菜单，返回是否重绘"""
        with self.lock:
            items = self.history_manager.load()
            if not force and self._unchanged(items):
                return False
            self._items = items
            self._render(items)
        logger.debug("菜单已刷新，共 %d 条", len(items))
        return True

    def _render(self, items):
        target = self.render_target
        slot_count = target.slot_count
        for i in range(slot_count):
            target.hide(i)

        display_items = items[:min(self.max_menu_items, slot_count)]
        if not display_items:
            if slot_count > 0:
                target.set_label(0, self.empty_title)
                target.disable(0)
                target.show(0)
            return

        for i, item in enumerate(display_items):
            target.set_label(i, f"{i + 1}. {format_label(item.content, self.label_length)}")
            target.enable(i)
            target.show(i)
