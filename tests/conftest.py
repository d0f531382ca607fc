import sys
from pathlib import Path

import pytest

# 项目为平铺模块布局，把仓库根目录加入导入路径
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))

from history_manager import HistoryManager  # noqa: E402


class FakeMenu:
    """记录所有调用的渲染目标"""

    def __init__(self, slot_count=25):
        self.slot_count = slot_count
        self.labels = [""] * slot_count
        self.visible = [False] * slot_count
        self.enabled = [True] * slot_count
        self.calls = []

    def set_label(self, index, text):
        self.calls.append(("set_label", index, text))
        self.labels[index] = text

    def show(self, index):
        self.calls.append(("show", index))
        self.visible[index] = True

    def hide(self, index):
        self.calls.append(("hide", index))
        self.visible[index] = False

    def enable(self, index):
        self.calls.append(("enable", index))
        self.enabled[index] = True

    def disable(self, index):
        self.calls.append(("disable", index))
        self.enabled[index] = False

    def visible_labels(self):
        return [label for label, shown in zip(self.labels, self.visible) if shown]


class FakeClipboard:
    """按顺序返回预设内容；元素为异常时抛出"""

    def __init__(self, reads=None, write_result=True):
        self.reads = list(reads or [])
        self.writes = []
        self.write_result = write_result

    def read_text(self):
        if not self.reads:
            return ""
        value = self.reads.pop(0)
        if isinstance(value, Exception):
            raise value
        return value

    def write_text(self, text):
        self.writes.append(text)
        if isinstance(self.write_result, Exception):
            raise self.write_result
        return self.write_result


@pytest.fixture
def history_file(tmp_path):
    return tmp_path / "history.json"


@pytest.fixture
def history_manager(history_file):
    return HistoryManager(history_file)


@pytest.fixture
def fake_menu():
    return FakeMenu()


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


def contents(items):
    return [item.content for item in items]
