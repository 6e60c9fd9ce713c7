# main.py
import io
import logging
import uuid
from datetime import datetime, timezone
from typing import List

import pandas as pd
from fastapi import Depends, FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import ValidationError

from config import settings
from insights import InsightGenerator
from matching import InvestorNotFoundError, NoCandidatesError, find_matches_for_investor
from models import Founder, InvestorCriteria, MatchResponse, StartupMetrics, StartupProfile
from seed_data import SEED_STARTUPS
from storage import InMemoryStore

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(settings.log_file) if settings.log_file else logging.NullHandler(),
    ],
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Investor Fit Matching API", version="0.1")

# seeded once at import, an emptied store stays empty
_store = InMemoryStore(SEED_STARTUPS if settings.seed_on_startup else None)
_generator = None


def get_store() -> InMemoryStore:
    return _store


def get_generator() -> InsightGenerator:
    global _generator
    if _generator is None:
        _generator = InsightGenerator()
    return _generator


@app.get("/")
async def root():
    return {"message": "Investor Fit Matching API is running! Visit /docs for interactive API docs."}


@app.post("/investors")
async def register_investor(investor: InvestorCriteria, store: InMemoryStore = Depends(get_store)):
    now = datetime.now(timezone.utc)
    existing = store.get_investor(investor.id)
    created_at = existing.created_at if existing and existing.created_at else now
    investor = investor.model_copy(update={"created_at": created_at, "updated_at": now})
    store.save_investor(investor)
    return {"status": "ok", "message": "Investor profile saved.", "investor": investor}


@app.get("/investors/{investor_id}", response_model=InvestorCriteria)
async def get_investor(investor_id: str, store: InMemoryStore = Depends(get_store)):
    investor = store.get_investor(investor_id)
    if investor is None:
        raise HTTPException(status_code=404, detail="Profile not found. Complete registration first.")
    return investor


@app.get("/startups", response_model=List[StartupProfile])
async def list_startups(store: InMemoryStore = Depends(get_store)):
    return store.list_startups()


@app.post("/startups")
async def add_startups(startups: List[StartupProfile], store: InMemoryStore = Depends(get_store)):
    store.add_startups(startups)
    return {"status": "ok", "imported": len(startups)}


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


REQUIRED_COLUMNS = ("name", "industry", "stage", "raising", "geography")


def _row_to_startup(row: dict) -> StartupProfile:
    blank = [c for c in REQUIRED_COLUMNS if _blank(row.get(c))]
    if blank:
        raise ValueError(f"blank required value in column(s): {', '.join(blank)}")
    founders = row.get("founders")
    return StartupProfile(
        id=str(row["id"]) if not _blank(row.get("id")) else f"startup-{uuid.uuid4().hex[:8]}",
        name=str(row["name"]),
        email=row.get("email"),
        industry=str(row["industry"]),
        stage=str(row["stage"]),
        raising=row["raising"],
        geography=str(row["geography"]),
        description=row.get("description") or "",
        website=row.get("website"),
        metrics=StartupMetrics(
            arr=row.get("arr"),
            customers=int(row["customers"]) if not _blank(row.get("customers")) else None,
            growth=str(row["growth"]) if not _blank(row.get("growth")) else None,
        ),
        founders=[Founder(name=n.strip()) for n in str(founders).split(";") if n.strip()]
        if not _blank(founders) else [],
    )


@app.post("/startups/upload")
async def upload_startups(file: UploadFile = File(...), store: InMemoryStore = Depends(get_store)):
    if not file.filename.endswith((".csv", ".txt")):
        raise HTTPException(status_code=400, detail="Only CSV files supported.")
    contents = await file.read()
    try:
        df = pd.read_csv(io.BytesIO(contents), dtype={"id": str})
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Could not parse CSV: {e}")

    df.columns = [c.strip().lower() for c in df.columns]
    missing = set(REQUIRED_COLUMNS) - set(df.columns)
    if missing:
        raise HTTPException(status_code=400, detail=f"Missing columns: {', '.join(sorted(missing))}")
    df = df.astype(object).where(pd.notnull(df), None)

    startups = []
    for i, row in enumerate(df.to_dict(orient="records"), start=1):
        try:
            startups.append(_row_to_startup(row))
        except (ValidationError, ValueError) as e:
            raise HTTPException(status_code=400, detail=f"Invalid startup on row {i}: {e}")
    store.add_startups(startups)
    logger.info(f"Imported {len(startups)} startups from {file.filename}")
    return {"status": "ok", "imported": len(startups)}


@app.get("/matches/{investor_id}", response_model=MatchResponse)
async def get_matches(
    investor_id: str,
    store: InMemoryStore = Depends(get_store),
    generator: InsightGenerator = Depends(get_generator),
):
    try:
        matches = await find_matches_for_investor(investor_id, store, generator)
    except InvestorNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found. Complete registration first.")
    except NoCandidatesError as e:
        raise HTTPException(status_code=500, detail=str(e))
    store.save_matches(investor_id, matches)
    return MatchResponse(investor_id=investor_id, matches=matches, generated_at=datetime.now(timezone.utc))


@app.get("/matches/{investor_id}/export")
async def export_matches(investor_id: str, store: InMemoryStore = Depends(get_store)):
    matches = store.get_matches(investor_id)
    if not matches:
        return JSONResponse({"detail": "No results yet."}, status_code=404)
    df = pd.DataFrame([
        {
            "rank": m.rank,
            "startup_id": m.profile.id,
            "name": m.profile.name,
            "industry": m.profile.industry,
            "stage": m.profile.stage,
            "raising": m.profile.raising,
            "geography": m.profile.geography,
            "score": m.internal_score,
            "explanation": m.explanation,
            "outreach": m.outreach,
        }
        for m in matches
    ])
    stream = io.StringIO()
    df.to_csv(stream, index=False)
    stream.seek(0)
    return StreamingResponse(
        io.BytesIO(stream.getvalue().encode()),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=matches-{investor_id}.csv"},
    )
