from fastapi import Request

from ...infrastructure.health import HealthReporter
from ...infrastructure.store import UserStore

def get_store(request: Request) -> UserStore:
    return request.app.state.store

def get_health_reporter(request: Request) -> HealthReporter:
    return request.app.state.health
