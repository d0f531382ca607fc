import logging

from PyQt6.QtCore import QObject, QTimer
from PyQt6.QtGui import QAction, QIcon
from PyQt6.QtWidgets import QApplication, QMenu, QStyle, QSystemTrayIcon

logger = logging.getLogger(__name__)


class ClipboardTray(QObject):
    """托盘菜单：固定数量的历史槽位 + 清空 / 退出"""

    def __init__(self, config, parent=None):
        super().__init__(parent)
        self.config = config
        self.dispatcher = None
        self.synchronizer = None

        # === 托盘图标 ===
        self.tray_icon = QSystemTrayIcon(self._load_icon(), self)
        self.tray_icon.setToolTip(config.get("tooltip", ""))

        # === 菜单 ===
        self.menu = QMenu()
        self.header_action = self.menu.addAction(config.get("header_title", ""))
        self.header_action.setEnabled(False)

        self.slot_actions = []
        for i in range(config.get("max_menu_items", 25)):
            action = QAction("", self.menu)
            action.setVisible(False)
            action.triggered.connect(lambda checked=False, idx=i: self._on_slot_triggered(idx))
            self.menu.addAction(action)
            self.slot_actions.append(action)

        self.menu.addSeparator()
        self.clear_action = self.menu.addAction(config.get("clear_title", "Clear History"))
        self.clear_action.triggered.connect(self._on_clear_triggered)
        self.quit_action = self.menu.addAction(config.get("quit_title", "Quit"))
        self.quit_action.triggered.connect(self._on_quit_triggered)

        self.tray_icon.setContextMenu(self.menu)

        # === 定时器 ===
        self.queue_timer = QTimer(self)
        self.queue_timer.timeout.connect(self.poll_queue)
        self.refresh_timer = QTimer(self)
        self.refresh_timer.timeout.connect(self.refresh_menu)

    def _load_icon(self):
        icon = QIcon.fromTheme(self.config.get("icon_theme", ""))
        if icon.isNull():
            icon = QApplication.style().standardIcon(QStyle.StandardPixmap.SP_DialogSaveButton)
        return icon

    # ---------------- 渲染接口（供 MenuSynchronizer 使用） ----------------

    @property
    def slot_count(self):
        return len(self.slot_actions)

    def set_label(self, index, text):
        # Qt 会把 & 当作快捷键标记
        self.slot_actions[index].setText(text.replace("&", "&&"))

    def show(self, index):
        self.slot_actions[index].setVisible(True)

    def hide(self, index):
        self.slot_actions[index].setVisible(False)

    def enable(self, index):
        self.slot_actions[index].setEnabled(True)

    def disable(self, index):
        self.slot_actions[index].setEnabled(False)

    # ---------------- 运行 ----------------

    def start(self, synchronizer, dispatcher):
        self.synchronizer = synchronizer
        self.dispatcher = dispatcher

        # 初始加载
        self.refresh_menu()
        self.queue_timer.start(self.config.get("queue_poll_ms", 100))
        self.refresh_timer.start(self.config.get("refresh_interval_ms", 1000))
        self.tray_icon.show()

    def shutdown(self):
        self.queue_timer.stop()
        self.refresh_timer.stop()
        self.tray_icon.hide()

    def refresh_menu(self):
        if self.synchronizer is not None:
            self.synchronizer.refresh()

    def poll_queue(self):
        if self.dispatcher is not None:
            self.dispatcher.dispatch_pending()

    def _on_slot_triggered(self, index):
        if self.dispatcher is not None:
            self.dispatcher.post_select(index)

    def _on_clear_triggered(self):
        if self.dispatcher is not None:
            self.dispatcher.post_clear()

    def _on_quit_triggered(self):
        if self.dispatcher is not None:
            self.dispatcher.post_quit()
