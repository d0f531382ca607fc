import logging
import sys

from PyQt6.QtWidgets import QApplication, QSystemTrayIcon

from config import (
    APP_NAME,
    CLEAR_TITLE,
    EMPTY_TITLE,
    HEADER_TITLE,
    LABEL_LENGTH,
    MAX_ITEMS,
    MAX_MENU_ITEMS,
    POLL_INTERVAL,
    QUEUE_POLL_MS,
    QUIT_TITLE,
    REFRESH_INTERVAL_MS,
    TRAY_ICON_THEME,
    TRAY_TOOLTIP,
    get_history_file_path,
)
from clipboard_adapter import PyperclipAdapter
from clipboard_worker import ClipboardWorker
from dispatcher import CommandDispatcher
from exceptions import StorageDirectoryError
from gui import ClipboardTray
from history_manager import HistoryManager
from logger import setup_logging
from menu_sync import MenuSynchronizer

logger = logging.getLogger(__name__)


def main():
    setup_logging()

    try:
        history_file = get_history_file_path()
    except StorageDirectoryError as e:
        logger.critical("%s", e)
        sys.exit(1)
    logger.info("历史文件: %s", history_file)

    # 初始化组件
    clipboard = PyperclipAdapter()
    history_manager = HistoryManager(history_file, MAX_ITEMS)

    # 配置参数
    config = {
        "tooltip": TRAY_TOOLTIP,
        "icon_theme": TRAY_ICON_THEME,
        "header_title": HEADER_TITLE,
        "clear_title": CLEAR_TITLE,
        "quit_title": QUIT_TITLE,
        "max_menu_items": MAX_MENU_ITEMS,
        "queue_poll_ms": QUEUE_POLL_MS,
        "refresh_interval_ms": REFRESH_INTERVAL_MS,
    }

    # 启动剪贴板监听线程
    worker = ClipboardWorker(history_manager, clipboard.read_text, POLL_INTERVAL)
    worker.start()

    # 启动 Qt 应用
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setQuitOnLastWindowClosed(False)
    if not QSystemTrayIcon.isSystemTrayAvailable():
        logger.warning("系统托盘不可用，菜单可能无法显示")

    tray = ClipboardTray(config)
    synchronizer = MenuSynchronizer(
        history_manager, tray, MAX_MENU_ITEMS, LABEL_LENGTH, EMPTY_TITLE
    )

    def on_quit():
        tray.shutdown()
        worker.stop()
        worker.join(timeout=1.0)
        app.quit()

    dispatcher = CommandDispatcher(
        history_manager, synchronizer, clipboard.write_text, on_quit=on_quit
    )
    tray.start(synchronizer, dispatcher)

    try:
        sys.exit(app.exec())
    except KeyboardInterrupt:
        worker.stop()
        logger.info("退出中...")


if __name__ == "__main__":
    main()
