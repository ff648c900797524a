"""
세션 트레이서 - chrome://tracing 형식

탐색/저장/검색 같은 세션 동작마다 B/E 쌍을, 경고성 상황(탭 가득 참, 뒤로 갈 곳 없음,
저장 실패)마다 instant 이벤트를 남긴다. 기본은 꺼져 있고 --trace 로 켠다.

    Tracer.get().enable("trace.json")

    with MeasureTime("visit", "session", {"url": url}):
        ...

    @MeasureTime.trace("store_save", "storage")
    def save(...): ...

    Tracer.get().finish()   # 종료 시 JSON 저장 (atexit 에도 등록됨)
"""
import atexit
import json
import os
import threading
import time
from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

PROFILER_VERSION = "Surf Session Profiler v1.0"


@dataclass
class TraceEvent:
    """이벤트 하나 - ph: 'B' 시작, 'E' 종료, 'i' 시점"""
    name: str
    cat: str
    ph: str
    ts: float                   # microseconds
    tid: int
    pid: int
    args: Dict[str, Any] = field(default_factory=dict)
    s: Optional[str] = None     # instant scope: 't' / 'p' / 'g'

    def to_dict(self) -> Dict[str, Any]:
        event = {"name": self.name, "cat": self.cat, "ph": self.ph,
                 "ts": self.ts, "tid": self.tid, "pid": self.pid}
        # 비어 있는 선택 필드는 생략
        if self.args:
            event["args"] = self.args
        if self.s:
            event["s"] = self.s
        return event


class Tracer:
    """프로세스 전체에서 하나만 쓰는 이벤트 수집기"""

    _instance: Optional["Tracer"] = None
    _lock = threading.Lock()

    def __init__(self):
        self.events: List[TraceEvent] = []
        self.lock = threading.Lock()
        self.enabled = False
        self.output_file: Optional[str] = None
        self.process_id = os.getpid()
        self.start_time = time.perf_counter()

    @classmethod
    def get(cls) -> "Tracer":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = Tracer()
                    atexit.register(cls._instance.finish)
        return cls._instance

    def enable(self, output_file: str):
        """수집 시작, 이전 이벤트는 버림"""
        self.output_file = output_file
        self.enabled = True
        self.clear()

    def record(self, name: str, category: str, phase: str,
               args: Optional[Dict] = None, scope: Optional[str] = None):
        if not self.enabled:
            return
        event = TraceEvent(
            name, category, phase,
            ts=(time.perf_counter() - self.start_time) * 1_000_000,
            tid=threading.get_ident(),
            pid=self.process_id,
            args=dict(args or {}),
            s=scope,
        )
        with self.lock:
            self.events.append(event)

    def begin(self, name: str, category: str = "function", args: Optional[Dict] = None):
        self.record(name, category, "B", args)

    def end(self, name: str, category: str = "function", args: Optional[Dict] = None):
        self.record(name, category, "E", args)

    def instant(self, name: str, category: str = "instant", scope: str = "t", args: Optional[Dict] = None):
        self.record(name, category, "i", args, scope)

    def snapshot(self) -> Dict[str, Any]:
        """지금까지의 이벤트를 trace 파일 구조로"""
        process = {"name": "process_name", "ph": "M", "pid": self.process_id,
                   "args": {"name": "SurfBrowser"}}
        with self.lock:
            events = [e.to_dict() for e in self.events]
        return {
            "traceEvents": [process] + events,
            "displayTimeUnit": "ms",
            "otherData": {"version": PROFILER_VERSION},
        }

    def finish(self):
        """수집 종료 후 JSON 저장, 꺼져 있으면 아무것도 하지 않음"""
        if not self.enabled or not self.output_file:
            return
        self.enabled = False

        with open(self.output_file, "w") as f:
            json.dump(self.snapshot(), f)
        print(f"Trace saved to {self.output_file}")

    def clear(self):
        with self.lock:
            self.events.clear()
            self.start_time = time.perf_counter()


class MeasureTime:
    """구간 측정 - with 블록 또는 @MeasureTime.trace 데코레이터

    블록이 예외로 끝나면 종료 이벤트의 args 에 예외 이름이 남는다.
    """

    def __init__(self, name: str, category: str = "function", args: Optional[Dict] = None):
        self.name = name
        self.category = category
        self.args = args
        self.tracer = Tracer.get()

    def __enter__(self):
        self.tracer.begin(self.name, self.category, self.args)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.tracer.end(self.name, self.category, {"error": exc_type.__name__} if exc_type else None)
        return False

    @staticmethod
    def trace(name: str, category: str = "function") -> Callable:
        def decorator(func: Callable) -> Callable:
            @wraps(func)
            def wrapper(*args, **kwargs):
                with MeasureTime(name, category):
                    return func(*args, **kwargs)
            return wrapper
        return decorator


def trace_instant(name: str, category: str = "instant", args: Optional[Dict] = None):
    Tracer.get().instant(name, category, args=args)
