from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from route_planner.routers import health
from route_planner.routers import routes
from route_planner.core.logging import setup_logging
from route_planner.config import settings

app = FastAPI(title="Route Optimization Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health.router)
app.include_router(routes.router)

@app.on_event("startup")
async def startup_event():
    setup_logging()
