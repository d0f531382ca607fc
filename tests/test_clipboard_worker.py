import time
from unittest.mock import MagicMock

from clipboard_worker import ClipboardWorker
from conftest import FakeClipboard, contents


def make_worker(history_manager, reads):
    clipboard = FakeClipboard(reads)
    return ClipboardWorker(history_manager, clipboard.read_text, poll_interval=0.01)


def test_a_b_a_keeps_single_a_on_top(history_manager):
    worker = make_worker(history_manager, ["A", "B", "A"])
    for _ in range(3):
        worker.poll_once()
    assert contents(history_manager.load()) == ["A", "B"]


def test_unchanged_clipboard_is_recorded_once():
    manager = MagicMock()
    worker = ClipboardWorker(manager, FakeClipboard(["A", "A", "A"]).read_text)
    results = [worker.poll_once() for _ in range(3)]
    assert results == [True, False, False]
    manager.add_item.assert_called_once_with("A")


def test_empty_and_whitespace_reads_are_ignored():
    manager = MagicMock()
    worker = ClipboardWorker(manager, FakeClipboard(["", "  \n\t", None]).read_text)
    for _ in range(3):
        assert worker.poll_once() is False
    manager.add_item.assert_not_called()
    assert worker.last_data is None


def test_read_error_keeps_last_observed_value():
    manager = MagicMock()
    reads = ["A", RuntimeError("clipboard busy"), "A", "B"]
    worker = ClipboardWorker(manager, FakeClipboard(reads).read_text)

    assert worker.poll_once() is True
    assert worker.poll_once() is False
    assert worker.last_data == "A"
    assert worker.poll_once() is False
    assert worker.poll_once() is True
    assert [c.args[0] for c in manager.add_item.call_args_list] == ["A", "B"]


def test_content_is_stored_unmodified(history_manager):
    worker = make_worker(history_manager, ["  padded text\n"])
    worker.poll_once()
    assert contents(history_manager.load()) == ["  padded text\n"]


def test_clear_does_not_recapture_current_clipboard(history_manager):
    worker = make_worker(history_manager, ["A", "A", "B", "A"])
    worker.poll_once()
    history_manager.clear()

    # 剪贴板仍是 A：不重新记录
    worker.poll_once()
    assert history_manager.load() == []

    # 内容变化后再复制 A 会重新记录
    worker.poll_once()
    worker.poll_once()
    assert contents(history_manager.load()) == ["A", "B"]


def test_last_data_advances_even_when_save_fails():
    manager = MagicMock()
    manager.add_item.return_value = False
    worker = ClipboardWorker(manager, FakeClipboard(["A", "A"]).read_text)
    worker.poll_once()
    worker.poll_once()
    manager.add_item.assert_called_once_with("A")


class FlakyStore:
    """第一次写入抛异常，之后委托给真实存储"""

    def __init__(self, history_manager):
        self.history_manager = history_manager
        self.failures = 1

    def add_item(self, content):
        if self.failures:
            self.failures -= 1
            raise RuntimeError("unexpected store failure")
        return self.history_manager.add_item(content)


def test_thread_survives_store_exception(history_manager):
    clipboard = FakeClipboard(["A", "B"])
    worker = ClipboardWorker(FlakyStore(history_manager), clipboard.read_text, poll_interval=0.01)
    worker.start()
    try:
        deadline = time.time() + 2.0
        while not history_manager.load() and time.time() < deadline:
            time.sleep(0.01)
        assert worker.is_alive()
    finally:
        worker.stop()
        worker.join(timeout=2.0)

    assert contents(history_manager.load()) == ["B"]


def test_thread_runs_until_stopped(history_manager):
    worker = ClipboardWorker(history_manager, lambda: "X", poll_interval=0.01)
    worker.start()
    try:
        deadline = time.time() + 2.0
        while not history_manager.load() and time.time() < deadline:
            time.sleep(0.01)
    finally:
        worker.stop()
        worker.join(timeout=2.0)

    assert not worker.is_alive()
    assert not worker.running
    assert contents(history_manager.load()) == ["X"]
