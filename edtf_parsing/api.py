import logging
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from edtf_parsing import DatePairList
from edtf_parsing.config import load_config
from edtf_parsing.schema import validate_payload

logger = logging.getLogger(__name__)

config = load_config()

# Create FastAPI app
app = FastAPI(
    title="EDTF API",
    description="Parse and normalize Extended Date/Time Format values",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


# Pydantic models
class DatePartModel(BaseModel):
    value: int = 0
    has_value: bool = False
    is_uncertain: bool = False
    is_approximate: bool = False
    unspecified_mask: int = 0
    insignificant_digits: int = 0


class DateModel(BaseModel):
    status: str
    year: DatePartModel
    month: DatePartModel
    day: DatePartModel
    season_qualifier: Optional[str] = None
    hour: int = 0
    minute: int = 0
    second: int = 0
    timezone_offset: int = 0
    has_timezone_offset: bool = False


class DatePairModel(BaseModel):
    edtf: str
    status: str
    is_range: bool = False
    start: DateModel
    end: DateModel


class DatePairListModel(BaseModel):
    edtf: str
    mode: str
    valid: bool
    items: List[DatePairModel] = []


class NormalizedValue(BaseModel):
    input: str
    edtf: str


class PayloadValidation(BaseModel):
    valid: bool
    errors: Optional[List[str]] = None


def _parse_or_reject(value: str) -> DatePairList:
    if len(value) > config.max_input_length:
        logger.info("Rejected EDTF value of length %d", len(value))
        raise HTTPException(
            status_code=422,
            detail=f"Value exceeds {config.max_input_length} characters",
        )

    parsed = DatePairList.parse(value)
    if not parsed.is_valid:
        logger.info("Rejected invalid EDTF value %r", value)
        raise HTTPException(status_code=422, detail=f"Invalid EDTF value: {value}")
    return parsed


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "message": "EDTF API",
        "version": "1.0.0",
        "description": "Extended Date/Time Format parsing, levels 0-2",
        "endpoints": {
            "parse": "/parse?value={edtf}",
            "normalize": "/normalize?value={edtf}",
            "validate": "/validate",
            "health": "/health"
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/parse", response_model=DatePairListModel)
def parse_value(value: str = Query(..., description="EDTF date, interval, range or list")):
    """Return the parsed structure of an EDTF value."""
    return _parse_or_reject(value).to_dict()


@app.get("/normalize", response_model=NormalizedValue)
def normalize_value(value: str = Query(..., description="EDTF date, interval, range or list")):
    """Return the canonical spelling of an EDTF value."""
    return {"input": value, "edtf": _parse_or_reject(value).format()}


@app.post("/validate", response_model=PayloadValidation)
def validate_serialized(payload: Dict[str, Any] = Body(..., description="A serialized EDTF value, as returned by /parse")):
    """Check a serialized value against the EDTF JSON schema."""
    is_valid, errors = validate_payload(payload)
    if not is_valid:
        logger.info("Rejected serialized EDTF payload: %s", errors)
    return {"valid": is_valid, "errors": errors}
