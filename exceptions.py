"""剪贴板历史的异常定义"""


class ClipboardHistoryError(Exception):
    """所有剪贴板历史错误的基类"""

    def __init__(self, message, original_error=None):
        super().__init__(message)
        self.original_error = original_error

    def __str__(self):
        base_msg = super().__str__()
        if self.original_error:
            return f"{base_msg} (Caused by: {type(self.original_error).__name__}: {self.original_error})"
        return base_msg


class StorageDirectoryError(ClipboardHistoryError):
    """无法解析或创建历史目录，启动时致命"""
    pass


class HistoryWriteError(ClipboardHistoryError):
    """历史文件写入失败"""
    pass
