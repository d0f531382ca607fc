# 配置与常量定义
from pathlib import Path

from exceptions import StorageDirectoryError

MAX_ITEMS = 100              # 历史最大条数
MAX_MENU_ITEMS = 25          # 菜单最多显示条数
LABEL_LENGTH = 50            # 菜单标签最大长度
POLL_INTERVAL = 0.1          # 剪贴板轮询间隔（秒）
REFRESH_INTERVAL_MS = 1000   # 菜单刷新间隔（毫秒）
QUEUE_POLL_MS = 100          # Qt 定时器轮询命令队列间隔（毫秒）

HISTORY_DIR_NAME = ".clipboard_history"  # 历史目录（位于用户主目录下）
HISTORY_FILE_NAME = "history.json"       # 历史记录文件

APP_NAME = "ClipHis"
TRAY_TOOLTIP = "ClipHis - Clipboard History Manager"
TRAY_ICON_THEME = "edit-paste"
HEADER_TITLE = "Recent History"
EMPTY_TITLE = "No clipboard history"
CLEAR_TITLE = "Clear History"
QUIT_TITLE = "Quit"

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_history_file_path(home=None):
    """返回历史文件路径，并确保其目录存在"""
    try:
        base = Path(home) if home is not None else Path.home()
        data_dir = base / HISTORY_DIR_NAME
        data_dir.mkdir(parents=True, exist_ok=True)
    except (OSError, RuntimeError) as e:
        raise StorageDirectoryError("无法创建历史目录", original_error=e)
    return data_dir / HISTORY_FILE_NAME
