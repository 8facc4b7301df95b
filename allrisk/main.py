"""
ALL Genomic Risk Classifier - FastAPI Application

Thin HTTP adapter around the classification layer:
- Ph-like pathway classification
- IKZF1 PLUS structural marker classification
- Combined decision with treatment recommendations
- Gene catalog and marker reference text
"""
import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from allrisk import __version__
from allrisk.config import settings
from allrisk.core.classification import RiskClassificationEngine
from allrisk.core.classification.gene_sets import GENE_GROUPS
from allrisk.core.classification.inputs import normalise_genes, record_from_mapping
from allrisk.core.classification.reference import (
    EVIDENCE_SOURCES, MARKER_SIGNIFICANCE, get_marker_significance,
)
from allrisk.models import (
    ClassificationRequest,
    ClassificationResponse,
    HealthResponse,
    MarkerRecordInput,
    OutcomeResponse,
    PathwayRequest,
)
from allrisk.utils import RiskClassificationError, setup_logging

setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

_engine = RiskClassificationEngine()


# ---- FastAPI Application ----

app = FastAPI(
    title="ALL Genomic Risk Classifier API",
    description="Ph-like and IKZF1 PLUS risk classification for acute lymphoblastic leukemia",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RiskClassificationError)
async def classification_error_handler(request: Request, exc: RiskClassificationError):
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.code} - {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def _health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.post("/api/v1/classify/pathway", response_model=OutcomeResponse, tags=["Classification"])
async def classify_pathway(request: PathwayRequest):
    """
    Ph-like classification of altered genes.
    """
    genes = normalise_genes(request.genes)
    return OutcomeResponse.from_outcome(_engine.classify_pathway(genes))


@app.post("/api/v1/classify/structural", response_model=OutcomeResponse, tags=["Classification"])
async def classify_structural(request: MarkerRecordInput):
    """
    IKZF1 PLUS classification of structural markers.
    """
    record = record_from_mapping(request.model_dump())
    return OutcomeResponse.from_outcome(_engine.classify_structural(record))


@app.post("/api/v1/classify", response_model=ClassificationResponse, tags=["Classification"])
async def classify(request: ClassificationRequest):
    """
    Run both classifiers and build combined recommendations.
    """
    genes = normalise_genes(request.genes)
    markers = request.markers.model_dump() if request.markers is not None else None
    record = record_from_mapping(markers)

    return ClassificationResponse.from_report(_engine.classify(genes, record))


# ---- Reference Endpoints ----

@app.get("/api/v1/genes", tags=["Reference"])
async def list_genes():
    """
    Gene catalog grouped by pathway, in display order.
    """
    return {
        "groups": [
            {"id": group_id, "title": title, "genes": list(genes)}
            for group_id, title, genes in GENE_GROUPS
        ]
    }


@app.get("/api/v1/rules", tags=["Reference"])
async def list_rules():
    """
    Structural rules in evaluation order, and the rules that can never be selected.
    """
    return {
        "rules": _engine.rule_order(),
        "shadowed": _engine.shadowed_rules(),
    }


@app.get("/api/v1/reference/markers", tags=["Reference"])
async def list_marker_reference():
    """
    Clinical-significance notes for every marker, plus evidence sources.
    """
    return {
        "markers": dict(MARKER_SIGNIFICANCE),
        "sources": [{"source": s, "summary": text} for s, text in EVIDENCE_SOURCES],
    }


@app.get("/api/v1/reference/markers/{marker_id}", tags=["Reference"])
async def get_marker_reference(marker_id: str):
    """
    Clinical-significance note for one marker.
    """
    return {"marker_id": marker_id, "significance": get_marker_significance(marker_id)}


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
