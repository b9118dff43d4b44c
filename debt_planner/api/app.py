"""FastAPI application entry point.

Run with: uvicorn debt_planner.api.app:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debt_planner.api.routes import debt_payoff
from debt_planner.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Debt Planner",
    description="Debt payoff strategy projections",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(debt_payoff.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
