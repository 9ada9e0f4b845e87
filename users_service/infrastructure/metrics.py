from prometheus_client import Counter, Histogram, Gauge, generate_latest
from fastapi import Response

# Метрики для HTTP запросов
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Метрики хранилища пользователей
users_created_total = Counter('users_created_total', 'Total users created')
users_deleted_total = Counter('users_deleted_total', 'Total users deleted')
user_validation_failures_total = Counter('user_validation_failures_total', 'Total rejected user payloads')
users_stored = Gauge('users_stored', 'Users currently held in memory')

def metrics_endpoint():
    """Endpoint для Prometheus метрик"""
    return Response(content=generate_latest(), media_type="text/plain")
