import logging

import pyperclip

logger = logging.getLogger(__name__)


class PyperclipAdapter:
    """系统剪贴板读写（仅文本）"""

    def read_text(self):
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            logger.debug("剪贴板读取失败: %s", e)
            return ""
        # 去掉首尾空白，"foo\n" 与 "foo" 视为同一条
        return text.strip() if isinstance(text, str) else ""

    def write_text(self, text):
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.warning("写入剪贴板失败: %s", e)
            return False
        return True
