"""Shared dependencies for API routes."""

from services import profile_store
from services.matching import engine, recorder


def get_match_engine() -> engine.MatchEngine:
    return engine.get_engine()


def get_profile_repository() -> profile_store.ProfileRepository:
    return profile_store.get_repository()


def get_match_recorder() -> recorder.MatchRecorder:
    return recorder.get_recorder()
