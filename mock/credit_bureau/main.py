from fastapi import FastAPI, HTTPException
from pathlib import Path
import json
import os

app = FastAPI(title="Mock Credit Bureau", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/credit_bureau_stub") if os.path.exists("/credit_bureau_stub") else Path(__file__).resolve().parents[1] / "credit_bureau_stub"

@app.get("/health")
def health(): return {"status": "ok"}

@app.get("/bureau/scores")
def get_score(ni_number: str):
    scores = json.loads((DATA_DIR / "scores.json").read_text())
    if ni_number not in scores:
        raise HTTPException(status_code=404, detail="applicant not found")
    return {"ni_number": ni_number, "score": scores[ni_number]}
