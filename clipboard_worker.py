import logging
import threading

from config import POLL_INTERVAL

logger = logging.getLogger(__name__)


class ClipboardWorker(threading.Thread):
    def __init__(self, history_manager, read_text, poll_interval=POLL_INTERVAL, daemon=True):
        super().__init__(name="ClipboardWorker", daemon=daemon)
        self.history_manager = history_manager
        self.read_text = read_text
        self.poll_interval = poll_interval
        self.last_data = None
        self._stop_event = threading.Event()

    @property
    def running(self):
        return not self._stop_event.is_set()

    def poll_once(self):
        """读取一次剪贴板，出现新内容时写入历史"""
        try:
            text = self.read_text()
        except Exception as e:
            logger.debug("剪贴板读取失败: %s", e)
            return False

        if not isinstance(text, str) or not text.strip():
            return False
        if text == self.last_data:
            return False

        # last_data 只记录本线程看到的内容，与历史文件无关
        self.last_data = text
        self.history_manager.add_item(text)
        return True

    def run(self):
        """后台轮询剪贴板"""
        logger.info("剪贴板监听已启动 (间隔 %.2fs)", self.poll_interval)
        while self.running:
            try:
                self.poll_once()
            except Exception:
                logger.exception("剪贴板记录失败")
            self._stop_event.wait(self.poll_interval)
        logger.info("剪贴板监听已停止")

    def stop(self):
        """停止工作线程"""
        self._stop_event.set()
