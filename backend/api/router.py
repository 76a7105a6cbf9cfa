from typing import Optional, Sequence

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_match_engine, get_match_recorder, get_profile_repository
from config import settings
from models.requests import MatchRequest
from models.responses import MatchResponse, MentorMatch
from models.schemas.match_result import MatchResult
from models.schemas.profiles import MentorCandidate
from services.matching.engine import MatchEngine
from services.matching.errors import LearnerNotFoundError
from services.matching.recorder import MatchRecorder
from services.profile_store import ProfileRepository

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _effective_limit(limit: Optional[int]) -> int:
    if limit is None:
        return settings.default_match_limit
    return min(limit, settings.max_match_limit)


def _to_response(
    engine: MatchEngine,
    learner_id: str,
    results: Sequence[MatchResult],
    candidates: Sequence[MentorCandidate],
) -> MatchResponse:
    by_id = {m.id: m for m in candidates}
    matches = []
    for r in results:
        mentor = by_id[r.mentor_id]
        matches.append(MentorMatch(
            mentor_id=r.mentor_id,
            display_name=mentor.display_name,
            score=round(r.score, 4),
            reasons=list(r.reasons),
            sub_scores=r.sub_scores,
            rating=mentor.rating,
            total_sessions=mentor.total_sessions,
            created_at=r.created_at,
        ))
    return MatchResponse(
        learner_id=learner_id,
        total=len(matches),
        matches=matches,
        weights_used=engine.weights.as_dict(),
    )


@router.get("/health")
async def health(engine: MatchEngine = Depends(get_match_engine)):
    return {
        "status": "ok",
        "weights": engine.weights.as_dict(),
        "min_score": engine.config.min_score,
    }


@router.get("/learners/{learner_id}/matches", response_model=MatchResponse)
@limiter.limit(settings.rate_limit)
async def learner_matches(
    request: Request,
    learner_id: str,
    background_tasks: BackgroundTasks,
    limit: Optional[int] = Query(None, ge=0),
    engine: MatchEngine = Depends(get_match_engine),
    repository: ProfileRepository = Depends(get_profile_repository),
    recorder: MatchRecorder = Depends(get_match_recorder),
):
    if not learner_id.strip():
        raise HTTPException(status_code=400, detail="learner_id is required")

    learner = repository.get_learner(learner_id)
    candidates = repository.list_eligible_mentors()

    try:
        results = engine.find_matches(learner, candidates, _effective_limit(limit))
    except LearnerNotFoundError:
        raise HTTPException(status_code=404, detail="Learner not found")

    # Runs after the response is sent; failures are logged only
    background_tasks.add_task(recorder.record_safely, learner_id, results)
    return _to_response(engine, learner_id, results, candidates)


@router.post("/matches", response_model=MatchResponse)
@limiter.limit(settings.rate_limit)
async def score_matches(
    request: Request,
    body: MatchRequest,
    engine: MatchEngine = Depends(get_match_engine),
):
    results = engine.find_matches(body.learner, body.candidates, _effective_limit(body.limit))
    return _to_response(engine, body.learner.id, results, body.candidates)
