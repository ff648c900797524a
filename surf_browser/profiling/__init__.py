# Profiling - chrome://tracing 형식의 이벤트 수집
from .measure_time import MeasureTime, Tracer, TraceEvent, trace_instant

__all__ = ['MeasureTime', 'Tracer', 'TraceEvent', 'trace_instant']
