import logging
import queue

logger = logging.getLogger(__name__)

CMD_SELECT = "select"
CMD_CLEAR = "clear"
CMD_QUIT = "quit"


class CommandDispatcher:
    """处理菜单命令。托盘信号只负责入队，这里在 GUI 线程里统一消费。"""

    def __init__(self, history_manager, synchronizer, write_text, on_quit=None, cmd_queue=None):
        self.history_manager = history_manager
        self.synchronizer = synchronizer
        self.write_text = write_text
        self.on_quit = on_quit
        self.cmd_queue = cmd_queue if cmd_queue is not None else queue.Queue()
        self._quit_requested = False

    def post_select(self, index):
        self.cmd_queue.put((CMD_SELECT, index))

    def post_clear(self):
        self.cmd_queue.put((CMD_CLEAR,))

    def post_quit(self):
        self.cmd_queue.put((CMD_QUIT,))

    def dispatch_pending(self):
        """非阻塞地处理队列中所有命令，返回处理条数"""
        handled = 0
        while True:
            try:
                command = self.cmd_queue.get_nowait()
            except queue.Empty:
                return handled
            self.handle(command)
            handled += 1

    def handle(self, command):
        name = command[0] if command else None
        if name == CMD_SELECT:
            self.select(command[1])
        elif name == CMD_CLEAR:
            self.clear()
        elif name == CMD_QUIT:
            self.quit()
        else:
            logger.warning("未知命令: %r", command)

    def select(self, index):
        """把第 index 个菜单项的内容写回剪贴板"""
        with self.synchronizer.lock:
            item = self.synchronizer.item_at(index)
            if item is None:
                logger.debug("忽略越界选择: %d", index)
                return False
            try:
                ok = self.write_text(item.content)
            except Exception as e:
                logger.warning("写回剪贴板失败: %s", e)
                return False
        if ok is False:
            logger.warning("写回剪贴板失败: 第 %d 项", index + 1)
            return False
        logger.info("已复制第 %d 项到剪贴板", index + 1)
        return True

    def clear(self):
        self.history_manager.clear()
        # 数据已知改变，跳过“无变化不重绘”的判断
        self.synchronizer.refresh(force=True)

    def quit(self):
        if self._quit_requested:
            return
        self._quit_requested = True
        logger.info("收到退出命令")
        if self.on_quit is not None:
            self.on_quit()
