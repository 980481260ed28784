from prometheus_client import Counter, Histogram, Gauge
import time
from typing import Callable
from functools import wraps
import asyncio

# API Metrics
HTTP_REQUEST_COUNT = Counter(
    'http_request_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status']
)

HTTP_REQUEST_DURATION = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Waitlist Metrics
WAITLIST_JOIN_COUNT = Counter(
    'waitlist_join_total',
    'Total number of waitlist join attempts',
    ['outcome']  # outcomes: joined, already_member, invalid, store_failure
)

WAITLIST_MEMBER_COUNT = Gauge(
    'waitlist_members',
    'Number of registered waitlist members at the last successful count'
)

STORE_OPERATION_DURATION = Histogram(
    'waitlist_store_operation_duration_seconds',
    'Membership store operation duration in seconds',
    ['backend', 'operation']  # operations: insert, count, ping
)

def track_time(metric) -> Callable:
    """Decorator to track function execution time"""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                return result
            finally:
                duration = time.time() - start_time
                metric.observe(duration)
        
        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                return result
            finally:
                duration = time.time() - start_time
                metric.observe(duration)
        
        return async_wrapper if asyncio.iscoroutinefunction(func) else sync_wrapper
    return decorator
