from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from baccarat_roads.api.routes import router
from baccarat_roads.config import settings
from baccarat_roads.observability import setup_logging
from baccarat_roads.roads.grid import InvalidGridDimensions

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    yield

app = FastAPI(title="Baccarat Roads", lifespan=lifespan)
app.include_router(router)

@app.exception_handler(InvalidGridDimensions)
async def invalid_dimensions(request: Request, exc: InvalidGridDimensions):
    return JSONResponse({"detail": str(exc)}, status_code=400)

@app.get("/")
def home():
    return {"ok": True, "app": "Baccarat Roads"}
