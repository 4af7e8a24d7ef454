from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, Header
from baccarat_roads.api.schemas import RoundIn, RoundOut, RoadsOut, PredictionsOut
from baccarat_roads.services import RoadSession
from baccarat_roads.config import settings

router = APIRouter()

_session: RoadSession | None = None


def get_session() -> RoadSession:
    global _session
    if _session is None:
        _session = RoadSession()
    return _session


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")

@router.post('/rounds', response_model=RoundOut)
async def add_round(data: RoundIn, session: RoadSession = Depends(get_session), ok=Depends(_auth)):
    r = session.append(data.outcome, data.result, data.pair)
    return asdict(r)

@router.post('/undo')
async def undo(session: RoadSession = Depends(get_session), ok=Depends(_auth)):
    r = session.undo()
    if r is None:
        raise HTTPException(404, detail="no rounds to undo")
    return {'removed': asdict(r), 'total': len(session.rounds)}

@router.post('/reset')
async def reset(session: RoadSession = Depends(get_session), ok=Depends(_auth)):
    session.reset()
    return {'ok': True}

@router.get('/roads', response_model=RoadsOut)
async def roads(session: RoadSession = Depends(get_session)):
    return session.snapshot()

@router.get('/predictions', response_model=PredictionsOut)
async def predictions(session: RoadSession = Depends(get_session)):
    return session.snapshot()['predictions']
