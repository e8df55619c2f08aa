"""
並發控制工具

提供 Process 內的鎖定機制，防止競態條件（Race Condition）

FastAPI 會把同步 endpoint 丟到 thread pool 執行，所以所有共享狀態
都必須假設會被多個執行緒同時存取：
- Registry 的 map：讀多寫少，使用讀寫鎖（ReadWriteLock）
- 每個 Wheel 的結果列表：使用各自的 threading.Lock（見 models.Wheel）
"""
import threading
from contextlib import contextmanager


class ReadWriteLock:
    """
    讀寫鎖（寫者優先）

    規則：
    - 多個讀者可以同時持有讀鎖
    - 寫者獨佔，持有期間沒有任何讀者
    - 有寫者在等待時，新的讀者會先等待（避免寫者飢餓）

    範例：
        lock = ReadWriteLock()

        with lock.read_locked():
            wheel = wheels.get(wheel_id)

        with lock.write_locked():
            wheels[wheel_id] = wheel

    注意：
        - 不可重入：持有讀鎖時再取寫鎖會 deadlock
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer_active or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer_active or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer_active = True

    def release_write(self) -> None:
        with self._cond:
            self._writer_active = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
