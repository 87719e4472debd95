import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.common.constants import LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL, UI_PORT

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

from api.routes import charts

app = FastAPI(title="ComposeCharts Backend", version="1.0.0")

# CORS: allow Streamlit
app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://localhost:{UI_PORT}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(charts.router)


@app.get("/api/health")
def health():
    return {"status": "ok"}
