from __future__ import annotations
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError

from ..scoring.grader import grade
from ..scoring.models import Passage, ScoreResult

router = APIRouter(prefix="/api", tags=["grading"])


class GradeRequest(BaseModel):
	# Kept loose so malformed payloads reach the 400 checks below instead of a 422
	summary: Any = None
	passage: Any = None


def _validate_passage(payload: Any) -> Passage:
	if not isinstance(payload, dict):
		raise HTTPException(status_code=400, detail={"error": "Invalid passage structure", "details": "Passage must be an object"})
	if not isinstance(payload.get("text"), str) or not payload["text"].strip():
		raise HTTPException(status_code=400, detail={"error": "Invalid passage structure", "details": "Passage text is required"})
	if not isinstance(payload.get("keyElements"), dict):
		raise HTTPException(status_code=400, detail={"error": "Invalid passage structure", "details": "Passage keyElements are required"})
	try:
		return Passage.model_validate(payload)
	except ValidationError as e:
		raise HTTPException(status_code=400, detail={"error": "Invalid passage structure", "details": str(e)})


@router.post("/grade", response_model=ScoreResult)
async def grade_summary(req: GradeRequest):
	if not req.summary or not req.passage:
		details: Dict[str, bool] = {"summary": bool(req.summary), "passage": bool(req.passage)}
		raise HTTPException(status_code=400, detail={"error": "Missing required fields", "details": details})
	passage = _validate_passage(req.passage)
	return await grade(req.summary, passage)
